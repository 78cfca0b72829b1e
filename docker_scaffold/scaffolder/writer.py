"""Writes the rendered scaffold files into the target directory.

Checks for files that would be overwritten, asks once before touching any of
them, then renders every template in a fixed order.  The first failure aborts
the remaining templates; files already written in the run are left as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import TemplateError

from docker_scaffold.config import ScaffoldConfig
from docker_scaffold.resolver.prompter import Prompter
from docker_scaffold.utils import console, print_warning

from .templates import TemplateRenderer

logger = logging.getLogger(__name__)


# Template name -> output path relative to the target directory
TEMPLATES: dict[str, str] = {
    "Dockerfile.j2": "Dockerfile",
    "docker-compose.yml.j2": "docker-compose.yml",
    "dockerignore.j2": ".dockerignore",
    "deploy.yml.j2": ".github/workflows/deploy.yml",
}


class GenerationError(Exception):
    """Raised when a single output file cannot be rendered or written."""

    def __init__(self, dest: str, message: str) -> None:
        self.dest = dest
        self.message = message
        super().__init__(f"{dest}: {message}")


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    written: list[Path] = field(default_factory=list)
    cancelled: bool = False


class ScaffoldWriter:
    """Renders all scaffold templates into *target_dir*.

    Attributes:
        renderer: Template renderer.
        prompter: Used for the overwrite confirmation.
        target_dir: Directory the output paths are relative to.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        prompter: Prompter,
        target_dir: str | Path | None = None,
    ) -> None:
        self.renderer = renderer
        self.prompter = prompter
        self.target_dir = Path(target_dir) if target_dir is not None else Path.cwd()

    def existing_files(self) -> list[str]:
        """Return the output paths that already exist, in template order."""
        return [dest for dest in TEMPLATES.values() if (self.target_dir / dest).exists()]

    def confirm_overwrite(self) -> bool:
        """Ask before overwriting; ``True`` when nothing would be overwritten."""
        existing = self.existing_files()
        if not existing:
            return True

        print_warning("\nWarning: The following files already exist:")
        for dest in existing:
            console.print(f"  - {dest}")
        return self.prompter.confirm("Do you want to overwrite these files?", default=False)

    def generate(self, config: ScaffoldConfig) -> GenerationResult:
        """Render and write every template for *config*.

        Returns:
            A :class:`GenerationResult`; ``cancelled`` is set when the user
            declined to overwrite, in which case nothing was written.

        Raises:
            GenerationError: On the first template that fails to render or
                write.
        """
        if not self.confirm_overwrite():
            print_warning("Operation cancelled. No files were modified.")
            return GenerationResult(cancelled=True)

        context = config.template_context()
        result = GenerationResult()

        for template_name, dest in TEMPLATES.items():
            try:
                path = self.renderer.render_to_file(
                    template_name, self.target_dir / dest, context
                )
            except (TemplateError, OSError) as exc:
                raise GenerationError(dest, str(exc)) from exc

            logger.debug("Wrote %s", path)
            console.print(f"  - Generated [green]{dest}[/green]")
            result.written.append(path)

        return result
