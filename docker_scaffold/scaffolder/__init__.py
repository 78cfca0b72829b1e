"""Docker Scaffold renderer and file writer.

Quick usage::

    from docker_scaffold.scaffolder import ScaffoldWriter, TemplateRenderer

    writer = ScaffoldWriter(TemplateRenderer(), prompter, target_dir=".")
    result = writer.generate(config)
"""

from docker_scaffold.scaffolder.templates import TemplateRenderer
from docker_scaffold.scaffolder.writer import (
    TEMPLATES,
    GenerationError,
    GenerationResult,
    ScaffoldWriter,
)

__all__ = [
    "GenerationError",
    "GenerationResult",
    "ScaffoldWriter",
    "TEMPLATES",
    "TemplateRenderer",
]
