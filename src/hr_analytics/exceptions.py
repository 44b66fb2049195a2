"""Exception types raised at the roster loading boundary.

The analytics engine itself never raises for data problems; these errors are
reserved for failures that happen before a snapshot exists (unreadable files,
failed downloads, malformed CSV headers or rows).
"""

from __future__ import annotations

from typing import Any


class HRAnalyticsError(Exception):
    """Base exception for the package."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RosterLoadError(HRAnalyticsError):
    """Raised when a roster cannot be fetched, read or parsed."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if source:
            details["source"] = source
        super().__init__(message, details=details, **kwargs)
