"""Errors for page-utils."""


class PageUtilsError(RuntimeError):
    """Base class for all package errors."""


class InvalidArgumentError(PageUtilsError, ValueError):
    """Raised when a helper is called with input it cannot work with."""
