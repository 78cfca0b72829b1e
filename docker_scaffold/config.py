"""Docker Scaffold configuration record.

A single, typed, flat configuration record for one ``init`` run.  The record
is a Pydantic v2 model so that the merged result of CLI flags, interactive
answers and defaults is validated once, right before rendering.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Deployment target groups
# ---------------------------------------------------------------------------

SSH_TARGETS: tuple[str, ...] = ("vps", "digitalocean", "other")

DEPLOYMENT_TARGETS: list[str] = [
    "aws",
    "digitalocean",
    "vps",
    "azure",
    "local",
    "ec2",
    "other",
]

DB_TYPES: list[str] = ["postgres", "mysql", "mongodb"]

NODE_VERSIONS: list[str] = ["18", "20", "latest"]

DOCKER_REGISTRIES: dict[str, str] = {
    "dockerhub": "Docker Hub",
    "local": "Local (no registry, build locally only)",
    "other": "Other registry (AWS ECR, GitHub, etc.)",
}

# Keyword in the EC2 build command that makes the container-copy step available.
CONTAINER_KEYWORD = "docker"

# Fields whose default is derived from other fields when left unset.
DERIVED_FIELDS: tuple[str, ...] = ("aws_cluster", "azure_resource_group", "ec2_repo_branch")


def derived_default(name: str, values: dict[str, Any]) -> str:
    """Return the derived default for *name* given the values resolved so far."""
    project_name = values.get("project_name") or "app"
    if name == "aws_cluster":
        return f"{project_name}-cluster"
    if name == "azure_resource_group":
        return f"{project_name}-resources"
    if name == "ec2_repo_branch":
        return values.get("main_branch") or "main"
    raise KeyError(name)


# ---------------------------------------------------------------------------
# Configuration record
# ---------------------------------------------------------------------------


class ScaffoldConfig(BaseModel):
    """Resolved configuration for a single scaffold run.

    Every field carries a default so the record is always total.  Only the
    fields belonging to ``deployment_target`` are meaningful to the workflow
    template; the rest keep their defaults and are never rendered.
    """

    # Project basics
    project_name: str = Field(default="my-app")
    container_port: str = Field(default="3000", description="Port exposed inside container")
    host_port: str = Field(default="3000", description="Port mapped on host machine")
    include_db: bool = Field(default=True)
    db_type: Literal["postgres", "mysql", "mongodb"] = Field(default="postgres")
    node_version: str = Field(default="18", description="Node.js base image tag")
    production: bool = Field(default=False)

    # GitHub workflow
    include_workflow: bool = Field(default=True)
    main_branch: str = Field(default="main")

    # Docker registry
    use_docker_registry: bool = Field(default=True)
    docker_registry: Literal["dockerhub", "local", "other"] = Field(default="dockerhub")
    docker_username: str = Field(default="yourusername")

    deployment_target: str = Field(default="vps")

    # SSH deployment (vps, digitalocean, other)
    ssh_host: str = Field(default="example.com")
    ssh_user: str = Field(default="deploy")
    ssh_path: str = Field(default="/var/www/app")

    # AWS
    aws_region: str = Field(default="us-east-1")
    aws_cluster: str = Field(default="")

    # Azure
    azure_resource_group: str = Field(default="")

    # EC2
    ec2_user: str = Field(default="ec2-user")
    ec2_host: str = Field(default="your-ec2-instance.example.com")
    ec2_repo_path: str = Field(default="/var/www/app")
    ec2_repo_url: str = Field(default="git@github.com:username/repo.git")
    ec2_repo_branch: str = Field(default="")
    ec2_build_command: str = Field(default="docker-compose up --build -d")
    ec2_ssh_key_name: str = Field(default="EC2_SSH_KEY")
    ec2_use_custom_container: bool = Field(default=False)
    ec2_container_path: str = Field(default="/usr/share/nginx/html")
    ec2_local_path: str = Field(default="./dist")

    @model_validator(mode="after")
    def _fill_derived_defaults(self) -> "ScaffoldConfig":
        for name in DERIVED_FIELDS:
            if not getattr(self, name):
                setattr(self, name, derived_default(name, self.__dict__))
        return self

    # ------------------------------------------------------------------
    # Target helpers
    # ------------------------------------------------------------------

    @property
    def uses_ssh(self) -> bool:
        """``True`` when the target deploys over plain SSH."""
        return self.deployment_target in SSH_TARGETS

    @property
    def copies_from_container(self) -> bool:
        """``True`` when the EC2 deploy copies files out of the built container."""
        return (
            self.deployment_target == "ec2"
            and self.ec2_use_custom_container
            and CONTAINER_KEYWORD in self.ec2_build_command
        )

    def required_secrets(self) -> list[tuple[str, str]]:
        """Return ``(secret_name, description)`` pairs the workflow expects."""
        if not self.include_workflow:
            return []
        secrets = [
            ("DOCKER_USERNAME", "Your Docker Hub username"),
            ("DOCKER_PASSWORD", "Your Docker Hub password or token"),
        ]
        if self.use_docker_registry and self.docker_registry == "other":
            secrets.append(("DOCKER_REGISTRY", "Your container registry host"))
        if self.deployment_target == "aws":
            secrets += [
                ("AWS_ACCESS_KEY_ID", "Your AWS access key"),
                ("AWS_SECRET_ACCESS_KEY", "Your AWS secret key"),
                ("AWS_REGION", "Your AWS region"),
            ]
        elif self.deployment_target == "azure":
            secrets.append(("AZURE_CREDENTIALS", "Your Azure credentials JSON"))
        elif self.uses_ssh:
            secrets.append(("SSH_PRIVATE_KEY", "Your private SSH key for deployment"))
        elif self.deployment_target == "ec2":
            secrets.append((self.ec2_ssh_key_name, "Private SSH key for the EC2 instance"))
        return secrets

    def template_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the resolved record."""
        context = self.model_dump()
        context["uses_ssh"] = self.uses_ssh
        context["copies_from_container"] = self.copies_from_container
        return context
