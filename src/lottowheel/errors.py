"""Errors raised by wheel generation."""

from __future__ import annotations


class WheelError(ValueError):
    """Base class for wheel generation failures."""


class WheelValidationError(WheelError):
    """Raised when the pool or guarantee parameters are out of range."""


class ResourceLimitError(WheelError):
    """Raised when an enumeration would exceed a configured ceiling."""

    def __init__(self, subject: str, estimated: int, limit: int, hint: str = "") -> None:
        self.subject = subject
        self.estimated = estimated
        self.limit = limit
        message = f"Too many {subject}: {estimated:,} (maximum: {limit:,})."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)
