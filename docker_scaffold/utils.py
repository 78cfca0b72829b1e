"""Shared console and logging helpers for Docker Scaffold.

All user-facing output goes through the Rich consoles defined here so that
tests can swap them out and colours stay consistent across modules.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(verbose: bool = False) -> None:
    """Route ``logging`` through Rich.

    WARNING and above by default; DEBUG when *verbose* is set.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, subtitle: str = "") -> None:
    """Print the tool banner followed by a dim rule."""
    console.print()
    console.print(f"[bold blue]{title}[/bold blue]")
    if subtitle:
        console.print(f"[blue]{subtitle}[/blue]")
    console.print(Rule(style="grey50"))
    console.print()


def print_summary_table(data: Mapping[str, Any], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
