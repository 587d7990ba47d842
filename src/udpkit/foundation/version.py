"""
Version of the installed udpkit distribution.
"""

from __future__ import annotations

from importlib import metadata as importlib_metadata

DISTRIBUTION = "udpkit"
UNKNOWN_VERSION = "0.0.0+unknown"

_VERSION: str | None = None


def get_version() -> str:
    global _VERSION
    if _VERSION is None:
        try:
            _VERSION = importlib_metadata.version(DISTRIBUTION)
        except importlib_metadata.PackageNotFoundError:
            _VERSION = UNKNOWN_VERSION
    return _VERSION


__all__ = ["DISTRIBUTION", "UNKNOWN_VERSION", "get_version"]
