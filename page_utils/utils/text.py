"""Text formatting utilities."""

from typing import Sequence

from page_utils.errors import InvalidArgumentError


def concat_or(items: Sequence[str]) -> str:
    """Join items into an English disjunction like 'a, b, or c'.

    Raises:
        InvalidArgumentError: if items is not a non-empty list or tuple.
    """
    if not isinstance(items, (list, tuple)) or len(items) == 0:
        raise InvalidArgumentError("Please provide a non-empty list")

    if len(items) == 1:
        return items[0]

    if len(items) == 2:
        return f"{items[0]} or {items[1]}"

    head = ", ".join(str(item) for item in items[:-1])
    return f"{head}, or {items[-1]}"
