"""Question descriptors for the interactive configuration resolver.

Every question is a small dataclass carrying its name, message, default, kind
and an optional relevance predicate.  Predicates receive a ``lookup`` callable
that reads a value with explicit options taking priority over answers
collected earlier in the same pass.

Deployment-target questions cannot be listed up front because the target may
itself be answered in the same session.  :class:`DeferredQuestions` is a
placeholder that the prompter expands in place once it is reached.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Union

from docker_scaffold.config import (
    CONTAINER_KEYWORD,
    DB_TYPES,
    DEPLOYMENT_TARGETS,
    DOCKER_REGISTRIES,
    NODE_VERSIONS,
    SSH_TARGETS,
    derived_default,
)

Lookup = Callable[[str], Any]
Predicate = Callable[[Lookup], bool]


class QuestionKind(str, Enum):
    """How a question is presented to the user."""

    TEXT = "text"
    CHOICE = "choice"
    CONFIRM = "confirm"


@dataclass
class Question:
    """A single interactive question.

    Attributes:
        name: Configuration field the answer is stored under.
        message: Prompt text shown to the user.
        default: Static default, or a callable receiving ``lookup`` that
            computes the default from values resolved so far.
        kind: Text, choice or confirmation.
        choices: Allowed values for ``CHOICE`` questions.
        labels: Optional human-readable label per choice value.
        when: Relevance predicate; ``None`` means always relevant.
    """

    name: str
    message: str
    default: Any = None
    kind: QuestionKind = QuestionKind.TEXT
    choices: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    when: Predicate | None = None

    def is_relevant(self, lookup: Lookup) -> bool:
        return True if self.when is None else bool(self.when(lookup))

    def resolve_default(self, lookup: Lookup) -> Any:
        if callable(self.default):
            return self.default(lookup)
        return self.default


@dataclass
class DeferredQuestions:
    """Placeholder that expands into more questions once it is reached."""

    name: str
    expand: Callable[[Lookup], list[Question]]


QueueItem = Union[Question, DeferredQuestions]


# ---------------------------------------------------------------------------
# Relevance predicates
# ---------------------------------------------------------------------------


def _workflow_included(lookup: Lookup) -> bool:
    return bool(lookup("include_workflow"))


def _registry_used(lookup: Lookup) -> bool:
    return _workflow_included(lookup) and bool(lookup("use_docker_registry"))


def _dockerhub_used(lookup: Lookup) -> bool:
    return _registry_used(lookup) and lookup("docker_registry") == "dockerhub"


def _build_uses_container(lookup: Lookup) -> bool:
    return CONTAINER_KEYWORD in (lookup("ec2_build_command") or "")


def _custom_container_used(lookup: Lookup) -> bool:
    return bool(lookup("ec2_use_custom_container"))


def _derived(name: str) -> Callable[[Lookup], str]:
    def _default(lookup: Lookup) -> str:
        return derived_default(
            name,
            {"project_name": lookup("project_name"), "main_branch": lookup("main_branch")},
        )

    return _default


# ---------------------------------------------------------------------------
# Question sets
# ---------------------------------------------------------------------------


def base_questions(cwd: str | Path | None = None) -> list[Question]:
    """Return the static question list, in asking order."""
    project_default = Path(cwd or os.getcwd()).name or "my-app"
    return [
        Question("project_name", "Project name", default=project_default),
        Question("container_port", "Port inside container", default="3000"),
        Question("host_port", "Port on host machine", default="3000"),
        Question(
            "include_db",
            "Include database service?",
            default=True,
            kind=QuestionKind.CONFIRM,
        ),
        Question(
            "db_type",
            "Choose database type",
            default="postgres",
            kind=QuestionKind.CHOICE,
            choices=list(DB_TYPES),
            when=lambda lookup: bool(lookup("include_db")),
        ),
        Question(
            "node_version",
            "Node.js version",
            default="18",
            kind=QuestionKind.CHOICE,
            choices=list(NODE_VERSIONS),
        ),
        Question(
            "production",
            "Generate production-ready configuration?",
            default=False,
            kind=QuestionKind.CONFIRM,
        ),
        Question(
            "include_workflow",
            "Include GitHub Actions workflow?",
            default=True,
            kind=QuestionKind.CONFIRM,
        ),
        Question(
            "use_docker_registry",
            "Use Docker image registry?",
            default=True,
            kind=QuestionKind.CONFIRM,
            when=_workflow_included,
        ),
        Question(
            "docker_registry",
            "Choose Docker registry type",
            default="dockerhub",
            kind=QuestionKind.CHOICE,
            choices=list(DOCKER_REGISTRIES),
            labels=dict(DOCKER_REGISTRIES),
            when=_registry_used,
        ),
        Question(
            "main_branch",
            "Main branch to trigger deployment",
            default="main",
            when=_workflow_included,
        ),
        Question(
            "docker_username",
            "Docker Hub username (for pushing images)",
            default="yourusername",
            when=_dockerhub_used,
        ),
        Question(
            "deployment_target",
            "Choose deployment target",
            default="vps",
            kind=QuestionKind.CHOICE,
            choices=list(DEPLOYMENT_TARGETS),
            when=_workflow_included,
        ),
    ]


def target_questions(lookup: Lookup) -> list[Question]:
    """Return the questions specific to the resolved deployment target.

    Returns an empty list when the workflow is excluded or the target has no
    dedicated fields (``local`` and unrecognised values).
    """
    if not _workflow_included(lookup):
        return []

    target = lookup("deployment_target")

    if target in SSH_TARGETS:
        return [
            Question("ssh_host", "SSH host for deployment (e.g., example.com)", default="example.com"),
            Question("ssh_user", "SSH user for deployment", default="deploy"),
            Question("ssh_path", "Path on server to deploy to", default="/var/www/app"),
        ]

    if target == "aws":
        return [
            Question("aws_region", "AWS region for deployment", default="us-east-1"),
            Question("aws_cluster", "AWS ECS cluster name", default=_derived("aws_cluster")),
        ]

    if target == "azure":
        return [
            Question(
                "azure_resource_group",
                "Azure resource group name",
                default=_derived("azure_resource_group"),
            ),
        ]

    if target == "ec2":
        return [
            Question("ec2_user", "EC2 instance user", default="ec2-user"),
            Question("ec2_host", "EC2 instance hostname or IP", default="your-ec2-instance.example.com"),
            Question("ec2_repo_path", "Path on EC2 to deploy to", default="/var/www/app"),
            Question(
                "ec2_repo_url",
                "Git repository URL for EC2 deployment",
                default="git@github.com:username/repo.git",
            ),
            Question("ec2_repo_branch", "Git branch to deploy on EC2", default=_derived("ec2_repo_branch")),
            Question(
                "ec2_build_command",
                "Build command to run on EC2 (docker-compose or other build command)",
                default="docker-compose up --build -d",
            ),
            Question("ec2_ssh_key_name", "Name of GitHub secret for the SSH key", default="EC2_SSH_KEY"),
            Question(
                "ec2_use_custom_container",
                "Do you need to access files from the Docker container after build? "
                "(useful for static sites)",
                default=False,
                kind=QuestionKind.CONFIRM,
                when=_build_uses_container,
            ),
            Question(
                "ec2_container_path",
                "Path inside container to copy files from (e.g., /app/build)",
                default="/usr/share/nginx/html",
                when=_custom_container_used,
            ),
            Question(
                "ec2_local_path",
                "Local path on EC2 to copy files to (e.g., ./dist)",
                default="./dist",
                when=_custom_container_used,
            ),
        ]

    return []


def build_question_queue(
    explicit: Mapping[str, Any],
    cwd: str | Path | None = None,
) -> list[QueueItem]:
    """Build the ordered question queue for a run.

    Questions for explicitly supplied fields are dropped here, and again when
    the deferred target questions are expanded, so nothing explicit is ever
    asked.
    """

    def _expand(lookup: Lookup) -> list[Question]:
        return [q for q in target_questions(lookup) if q.name not in explicit]

    queue: list[QueueItem] = [q for q in base_questions(cwd) if q.name not in explicit]
    queue.append(DeferredQuestions("deployment_details", _expand))
    return queue
