"""CLI join command function."""

from typing import List, Optional

import typer

from page_utils.cli.common import console, fail
from page_utils.errors import PageUtilsError
from page_utils.utils.text import concat_or


def join(
    items: Optional[List[str]] = typer.Argument(
        None, help="Items to join, e.g. 'red green blue'."
    ),
) -> None:
    """Join items into an 'a, b, or c' phrase."""
    try:
        phrase = concat_or(items or [])
    except PageUtilsError as e:
        fail(str(e))

    console.print(phrase, highlight=False, markup=False)
