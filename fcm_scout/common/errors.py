"""Exception hierarchy for scrape, extraction and local-data failures.

Every error raised below the API layer derives from ``ScoutError`` so route
handlers can convert them into the uniform error envelope in one place.
"""
from __future__ import annotations

from typing import Optional


class ScoutError(RuntimeError):
    """Base class for all FCM Scout failures."""


class UpstreamFetchError(ScoutError):
    """Network failure, timeout or non-2xx status from an upstream site."""

    def __init__(self, url: str, reason: str, *, status: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"GET {url} failed: {reason}")


class ExtractionError(ScoutError):
    """Unexpected exception while probing fetched HTML."""


class LocalDataError(ScoutError):
    """Local fallback file missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


__all__ = [
    "ScoutError",
    "UpstreamFetchError",
    "ExtractionError",
    "LocalDataError",
]
