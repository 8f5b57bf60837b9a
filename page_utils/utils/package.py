"""Installed distribution metadata."""

from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "page-utils"


def get_package_version() -> str:
    """Version of the installed page-utils distribution, '0.0.0' from a source tree."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
