"""Docker Scaffold command-line interface.

Usage::

    docker-scaffold init
    docker-scaffold init --project-name demo --include-workflow false
    docker-scaffold init --deployment-target ec2 --ec2-host 10.0.0.5
    python -m docker_scaffold init --production
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from docker_scaffold import __version__
from docker_scaffold.config import ScaffoldConfig
from docker_scaffold.resolver import ConfigResolver, ConfigurationError, Prompter, RichPrompter
from docker_scaffold.scaffolder import (
    TEMPLATES,
    GenerationError,
    ScaffoldWriter,
    TemplateRenderer,
)
from docker_scaffold.utils import (
    console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
    setup_logging,
)

# (field, flags, help) for every string-valued option.
_STRING_OPTIONS: list[tuple[str, tuple[str, ...], str]] = [
    ("project_name", ("-p", "--project-name", "--projectName"), "Name of your project"),
    ("container_port", ("-c", "--container-port", "--containerPort"), "Port exposed inside container"),
    ("host_port", ("--host-port", "--hostPort"), "Port mapped on host machine"),
    ("db_type", ("--db-type", "--dbType"), "Database type (postgres, mysql, mongodb)"),
    ("node_version", ("--node-version", "--nodeVersion"), "Node.js version to use"),
    ("main_branch", ("--main-branch", "--mainBranch"), "Main branch to trigger deployment"),
    ("docker_registry", ("--docker-registry", "--dockerRegistry"), "Docker registry to use (dockerhub, local, other)"),
    ("docker_username", ("--docker-username", "--dockerUsername"), "Docker Hub username for pushing images"),
    (
        "deployment_target",
        ("--deployment-target", "--deploymentTarget"),
        "Deployment target (aws, digitalocean, vps, azure, local, ec2, other)",
    ),
    ("ssh_host", ("--ssh-host", "--sshHost"), "SSH host for deployment"),
    ("ssh_user", ("--ssh-user", "--sshUser"), "SSH user for deployment"),
    ("ssh_path", ("--ssh-path", "--sshPath"), "Path on server to deploy to"),
    ("aws_region", ("--aws-region", "--awsRegion"), "AWS region for deployment"),
    ("aws_cluster", ("--aws-cluster", "--awsCluster"), "AWS ECS cluster name"),
    ("azure_resource_group", ("--azure-resource-group", "--azureResourceGroup"), "Azure resource group name"),
    ("ec2_user", ("--ec2-user", "--ec2User"), "EC2 instance user (e.g., ec2-user)"),
    ("ec2_host", ("--ec2-host", "--ec2Host"), "EC2 instance hostname or IP"),
    ("ec2_repo_path", ("--ec2-repo-path", "--ec2RepoPath"), "Path on EC2 where the repo will be cloned"),
    ("ec2_repo_url", ("--ec2-repo-url", "--ec2RepoUrl"), "Git repository URL for EC2 deployment"),
    ("ec2_repo_branch", ("--ec2-repo-branch", "--ec2RepoBranch"), "Git branch to deploy on EC2"),
    ("ec2_build_command", ("--ec2-build-command", "--ec2BuildCommand"), "Custom build command for EC2 deployment"),
    ("ec2_ssh_key_name", ("--ec2-ssh-key-name", "--ec2SshKeyName"), "Name of the SSH key secret for EC2 deployment"),
    ("ec2_container_path", ("--ec2-container-path", "--ec2ContainerPath"), "Path inside container to copy files from"),
    ("ec2_local_path", ("--ec2-local-path", "--ec2LocalPath"), "Local path on EC2 to copy files to"),
]

# (field, flags, help) for every boolean option.
_BOOL_OPTIONS: list[tuple[str, tuple[str, ...], str]] = [
    ("include_db", ("-d", "--include-db", "--includeDB"), "Include database service"),
    ("production", ("--production",), "Generate production-ready configuration"),
    ("include_workflow", ("--include-workflow", "--includeWorkflow"), "Include GitHub Actions workflow"),
    ("use_docker_registry", ("--use-docker-registry", "--useDockerRegistry"), "Use a Docker image registry"),
    (
        "ec2_use_custom_container",
        ("--ec2-use-custom-container", "--ec2UseCustomContainer"),
        "Whether to copy files from Docker container after deployment",
    ),
]

OPTION_FIELDS: list[str] = [name for name, _, _ in _STRING_OPTIONS + _BOOL_OPTIONS]

_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0"}


def parse_bool(value: str | bool) -> bool:
    """Parse a boolean flag value (``true``/``false``, ``yes``/``no``, ``1``/``0``)."""
    if isinstance(value, bool):
        return value
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docker-scaffold",
        description="CLI to scaffold Docker and CI/CD setup",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    init = subparsers.add_parser(
        "init",
        help="Generate Docker, Compose, and GitHub Actions workflow",
        description="Generate Docker, Compose, and GitHub Actions workflow",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Boolean options accept true/false or may be given without a value.\n"
            "Anything not supplied on the command line is asked interactively.\n"
        ),
    )

    for name, flags, help_text in _STRING_OPTIONS:
        init.add_argument(*flags, dest=name, default=None, help=help_text)

    for name, flags, help_text in _BOOL_OPTIONS:
        init.add_argument(
            *flags,
            dest=name,
            nargs="?",
            const=True,
            default=None,
            type=parse_bool,
            metavar="BOOL",
            help=help_text,
        )

    init.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def explicit_options(args: argparse.Namespace) -> dict[str, Any]:
    """Return only the configuration options supplied on the command line.

    An empty string value counts as not supplied, so the question is asked.
    """
    return {
        name: getattr(args, name)
        for name in OPTION_FIELDS
        if getattr(args, name, None) not in (None, "")
    }


def print_next_steps(config: ScaffoldConfig) -> None:
    """Print the generated files, follow-up commands and required secrets."""
    print_success("\nAll files generated successfully!")
    console.print("\nFiles created:")
    for dest in TEMPLATES.values():
        console.print(f"  [cyan]- {dest}[/cyan]")

    print_warning("\nNext steps:")
    console.print("  1. Review the generated files and make any necessary adjustments")
    console.print("  2. Build your Docker image: [bold]docker compose build[/bold]")
    console.print("  3. Start your containers: [bold]docker compose up[/bold]")

    secrets = config.required_secrets()
    if secrets:
        print_warning("\nGitHub Actions setup:")
        console.print("  1. Add these secrets to your GitHub repository:")
        for name, description in secrets:
            console.print(f"     - [bold]{name}[/bold]: {description}")
        console.print("  2. Push your code to GitHub to trigger the workflow")


def run_init(
    explicit: dict[str, Any],
    prompter: Prompter,
    target_dir: str | Path | None = None,
    renderer: TemplateRenderer | None = None,
) -> int:
    """Resolve the configuration, write the files and return an exit code."""
    target = Path(target_dir) if target_dir is not None else Path.cwd()

    print_header(
        "Docker Scaffold CLI",
        "Generate Docker configuration files for your project",
    )

    try:
        config = ConfigResolver(prompter, cwd=target).resolve(explicit)
    except ConfigurationError as exc:
        print_error(f"\nError: {exc}")
        return 1

    print_summary_table(
        {
            "Project": config.project_name,
            "Ports": f"{config.host_port} -> {config.container_port}",
            "Database": config.db_type if config.include_db else "none",
            "Node.js": config.node_version,
            "Workflow": config.deployment_target if config.include_workflow else "none",
        },
        title="Configuration",
    )
    print_warning("Generating Docker configuration files...")

    writer = ScaffoldWriter(renderer or TemplateRenderer(), prompter, target_dir=target)
    try:
        result = writer.generate(config)
    except GenerationError as exc:
        print_error(f"\nError generating files: {exc}")
        return 1

    if result.cancelled:
        return 0

    print_next_steps(config)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``docker-scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        code = run_init(explicit_options(args), RichPrompter())
    except KeyboardInterrupt:
        print_error("\nAborted.")
        sys.exit(130)

    sys.exit(code)


if __name__ == "__main__":
    main()
