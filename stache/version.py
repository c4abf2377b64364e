from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Installed package version.
    Does not import the rest of the package (to avoid cycles).
    """
    try:
        return metadata.version("stache")
    except metadata.PackageNotFoundError:
        return "0.0.0"

__all__ = ["tool_version"]
