"""CLI date command function."""

import typer
from rich.markup import escape

from page_utils.cli.common import echo
from page_utils.utils.validation import is_valid_date


def date(
    ctx: typer.Context,
    candidate: str = typer.Argument(..., help="Date to check, as YYYY-MM-DD."),
) -> None:
    """Check that a YYYY-MM-DD date names a real calendar day."""
    if is_valid_date(candidate):
        echo(ctx, f"{escape(candidate)} is valid", style="success")
        return

    echo(ctx, f"{escape(candidate)} is invalid", style="error")
    raise typer.Exit(1)
