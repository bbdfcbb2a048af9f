from __future__ import annotations

from typing import Optional


class DocServerError(Exception):
    """Base error for the documentation server."""


class ValidationError(DocServerError):
    """Raised when tool input is invalid."""


class NotFoundError(DocServerError):
    """Raised when the upstream reports a missing resource (404)."""


class UpstreamStatusError(DocServerError):
    """Raised when the upstream answers with any other non-success status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WrongEntryTypeError(DocServerError):
    """Raised when a contents entry is not of the expected type."""


class ExternalServiceError(DocServerError):
    """Raised when an external service (GitHub/article host) cannot be reached."""


class ReadmeNotFoundError(DocServerError):
    """Raised when no branch/filename combination yields a README."""


class MalformedResponseError(DocServerError):
    """Raised when an upstream payload lacks a required field."""


class UnknownToolError(DocServerError):
    """Raised when a tool name has no registered handler."""
