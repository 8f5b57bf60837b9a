"""Shared cli utilities."""

from dataclasses import dataclass
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.theme import Theme

from page_utils.utils.package import get_package_version

cli_theme = Theme(
    {
        "info": "bold cyan",
        "warning": "bold yellow",
        "error": "bold red",
        "success": "bold green",
        "title": "bold magenta",
    }
)
console = Console(theme=cli_theme)


@dataclass
class GlobalOptions:
    """Global options for the CLI."""

    quiet: bool = False


def echo(ctx: Optional[typer.Context], message: str, style: str = "info") -> None:
    """Respect global quiet flag; print only if not quiet."""
    quiet = False
    if ctx is not None and isinstance(getattr(ctx, "obj", None), GlobalOptions):
        quiet = ctx.obj.quiet

    if quiet:
        return

    console.print(message, style=style, highlight=False)


def fail(message: str, code: int = 1) -> NoReturn:
    """Print an error to stderr and exit with code."""
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code)


def version_callback(value: bool) -> None:
    """Callback to display version and exit."""
    if value:
        console.print(
            f"page-utils v{get_package_version()}", style="title", highlight=False
        )
        raise typer.Exit()
