"""CLI commands for reading URL fragment params."""

import json
from typing import Optional

import typer
from loguru import logger
from rich.markup import escape
from rich.table import Table

from page_utils.cli.common import console, echo
from page_utils.utils.url_params import (
    ParamType,
    fragment_from_url,
    get_param,
    hash_to_params,
)


def _params_table(params: dict) -> Table:
    table = Table(title="Fragment params")
    table.add_column("Name", style="bold")
    table.add_column("Raw value")
    for name, raw in params.items():
        table.add_row(escape(name), escape(raw))
    return table


def params(
    ctx: typer.Context,
    fragment: str = typer.Argument(..., help="URL fragment, with or without '#'."),
) -> None:
    """Show every well-formed key=value pair of a fragment."""
    parsed = hash_to_params(fragment)
    logger.debug(f"Parsed {len(parsed)} params from {fragment!r}")
    if not parsed:
        echo(ctx, "No params found.", style="warning")
        return

    console.print(_params_table(parsed))


def param(
    fragment: str = typer.Argument(..., help="URL fragment, with or without '#'."),
    name: str = typer.Argument(..., help="Param name to read."),
    param_type: ParamType = typer.Option(
        ParamType.STRING,
        "--type",
        "-t",
        case_sensitive=False,
        help="How to decode the raw value.",
    ),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Value to show when the param is missing."
    ),
) -> None:
    """Decode a single typed param from a fragment."""
    value = get_param(hash_to_params(fragment), name, param_type, default)
    if isinstance(value, list):
        value = json.dumps(value)

    console.print(str(value), highlight=False, markup=False)


def url(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Full URL including its '#' fragment."),
) -> None:
    """Show the fragment of a full URL and the params in it."""
    fragment = fragment_from_url(address)
    echo(ctx, f"Fragment: [bold]{escape(fragment) or '(none)'}[/bold]")
    params(ctx, fragment)
