"""Installed TurboDocs version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version of the installed turbodocs distribution, or 0.0.0 from a bare checkout."""
    try:
        return version("turbodocs")
    except PackageNotFoundError:
        return "0.0.0"
