"""Helpers for browser-facing pages: list phrasing, URL fragment params, dates."""

from page_utils.errors import InvalidArgumentError, PageUtilsError
from page_utils.utils.text import concat_or
from page_utils.utils.url_params import (
    ParamType,
    fragment_from_url,
    get_param,
    hash_to_params,
)
from page_utils.utils.validation import is_valid_date

__all__ = [
    "InvalidArgumentError",
    "PageUtilsError",
    "ParamType",
    "concat_or",
    "fragment_from_url",
    "get_param",
    "hash_to_params",
    "is_valid_date",
]
