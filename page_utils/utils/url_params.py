"""URL fragment parameter utilities.

A page keeps its view state in the URL fragment as ``key=value`` pairs joined
by ``&`` (e.g. ``#page=2&tags=a%2Cb&debug=true``). ``hash_to_params`` turns the
fragment into a mapping of raw values and ``get_param`` decodes one of them
into a typed value, falling back to a default when it is missing.

Both are fail-open: malformed entries are dropped and malformed values are
coerced, nothing here raises for bad input.
"""

import re
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import unquote, urlsplit

from loguru import logger

_DEC_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")


class ParamType(str, Enum):
    """Decoding rule applied to a raw fragment value."""

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    ARRAY = "ARRAY"


def fragment_from_url(url: str) -> str:
    """Return the fragment of a full URL without the leading '#'."""
    return urlsplit(url).fragment


def hash_to_params(fragment: str = "") -> Dict[str, str]:
    """Parse a URL fragment into a mapping of raw (still encoded) values.

    Entries that do not split into exactly one key and one value are dropped.
    Later duplicates overwrite earlier ones.
    """
    if fragment.startswith("#"):
        fragment = fragment[1:]

    params: Dict[str, str] = {}
    for item in fragment.split("&"):
        parts = item.split("=")
        if len(parts) == 2:
            params[parts[0]] = parts[1]
    return params


def parse_int(value: str) -> Union[int, float]:
    """Parse the leading integer of value, ignoring anything after it.

    Follows the browser's parseInt: leading whitespace and a sign are allowed,
    a 0x prefix means hex. Returns NaN when there is no leading number.
    """
    text = value.lstrip()
    sign = -1 if text[:1] == "-" else 1
    if text[:1] in ("+", "-"):
        text = text[1:]

    if text[:2].lower() == "0x":
        match = _HEX_RE.match(text, 2)
        base = 16
    else:
        match = _DEC_RE.match(text)
        base = 10

    if not match:
        return float("nan")
    return sign * int(match.group(), base)


def _decode(value: str) -> str:
    # percent-decoding only, '+' is not a space in fragments
    return unquote(value, errors="replace")


def get_param(
    params: Mapping[str, str],
    name: str,
    param_type: Union[ParamType, str],
    default: Optional[Any] = None,
) -> Any:
    """Get a typed parameter from a mapping built by hash_to_params.

    Returns default untouched when the parameter is missing or empty.
    Unrecognised types decode as STRING.
    """
    raw = params.get(name)
    if not raw:
        return default

    if param_type == ParamType.BOOLEAN:
        return raw.lower() != "false"

    if param_type == ParamType.INTEGER:
        return parse_int(raw)

    if param_type == ParamType.ARRAY:
        decoded = _decode(raw)
        logger.debug(f"Decoded array param {name!r}: {decoded}")
        return decoded.split(",")

    return _decode(raw)
