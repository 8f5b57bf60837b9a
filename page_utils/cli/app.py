"""Root cli app wiring."""

from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv

from page_utils.cli.commands.date import date
from page_utils.cli.commands.join import join
from page_utils.cli.commands.params import param, params, url
from page_utils.cli.common import GlobalOptions, version_callback
from page_utils.helpers.logging_helpers import configure_logger

app = typer.Typer(
    add_completion=False,
    help="Command line interface for page-utils.",
)

app.command("join")(join)
app.command("params")(params)
app.command("param")(param)
app.command("url")(url)
app.command("date")(date)


@app.callback(invoke_without_command=False)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-error output."
    ),
    verbose: int = typer.Option(
        0,
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity: -v for INFO, -vv for DEBUG.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Initialize global CLI options and context."""
    load_dotenv(find_dotenv(usecwd=True))
    ctx.obj = GlobalOptions(quiet=quiet)
    configure_logger(source="page-utils", quiet=quiet, verbose=verbose)


if __name__ == "__main__":
    app()
