"""Custom exception hierarchy for bookmeta."""

from typing import Any


class BookmetaError(Exception):
    """Base exception for all bookmeta errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(BookmetaError):
    """Input validation failed."""

    pass


class ResolutionError(BookmetaError):
    """Failed to resolve identifier."""

    pass


class SourceError(ResolutionError):
    """External bibliographic source failed (transport, status, timeout or payload)."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code
