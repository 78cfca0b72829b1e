"""Shared pytest fixtures for the Docker Scaffold test suite.

Provides reusable fixtures for:
- A scripted prompter that records which questions were asked
- Temporary target directories
- Resolved configurations for each deployment target
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from docker_scaffold.config import ScaffoldConfig
from docker_scaffold.resolver import Prompter, Question


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter(Prompter):
    """Prompter that answers from a script and falls back to the default.

    Attributes:
        asked: Question names in the order they were asked.
        defaults: Default offered for each asked question.
        confirmations: Messages passed to :meth:`confirm`.
    """

    def __init__(self, answers: dict[str, Any] | None = None, overwrite: bool = False) -> None:
        self.answers = answers or {}
        self.overwrite = overwrite
        self.asked: list[str] = []
        self.defaults: dict[str, Any] = {}
        self.confirmations: list[str] = []

    def ask(self, question: Question, default: Any) -> Any:
        self.asked.append(question.name)
        self.defaults[question.name] = default
        return self.answers.get(question.name, default)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.confirmations.append(message)
        return self.overwrite


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory for :class:`ScriptedPrompter` instances."""
    return ScriptedPrompter


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """A prompter that accepts every default and declines overwrites."""
    return ScriptedPrompter()


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Empty directory the scaffold is written into."""
    project_dir = tmp_path / "demo-app"
    project_dir.mkdir()
    return project_dir


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def basic_config() -> ScaffoldConfig:
    """Workflow-free configuration with a Postgres database."""
    return ScaffoldConfig(
        project_name="demo-app",
        container_port="8080",
        host_port="80",
        include_db=True,
        db_type="postgres",
        include_workflow=False,
    )


@pytest.fixture
def vps_config() -> ScaffoldConfig:
    return ScaffoldConfig(
        project_name="demo-app",
        deployment_target="vps",
        ssh_host="deploy.example.org",
        ssh_user="ubuntu",
        ssh_path="/srv/demo",
    )


@pytest.fixture
def aws_config() -> ScaffoldConfig:
    return ScaffoldConfig(
        project_name="demo-app",
        deployment_target="aws",
        aws_region="eu-west-1",
    )


@pytest.fixture
def azure_config() -> ScaffoldConfig:
    return ScaffoldConfig(
        project_name="demo-app",
        deployment_target="azure",
        azure_resource_group="demo-rg",
    )


@pytest.fixture
def ec2_config() -> ScaffoldConfig:
    return ScaffoldConfig(
        project_name="demo-app",
        deployment_target="ec2",
        ec2_host="10.0.0.5",
        ec2_build_command="docker compose up --build -d",
        ec2_use_custom_container=True,
        ec2_container_path="/app/build",
        ec2_local_path="./public",
        ec2_ssh_key_name="DEMO_EC2_KEY",
    )
