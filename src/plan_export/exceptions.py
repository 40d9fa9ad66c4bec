"""Error taxonomy for destination-facing collaborators."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    NO_API_KEY = "NO_API_KEY"
    INVALID_API_KEY = "INVALID_API_KEY"
    API_ERROR = "API_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EXPORT_ERROR = "EXPORT_ERROR"


class ExportError(Exception):
    """Base exception for all plan_export errors."""

    code: ErrorCode = ErrorCode.EXPORT_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoApiKeyError(ExportError):
    """No destination API key has been configured."""

    code = ErrorCode.NO_API_KEY

    def __init__(self, message: str = "No API key configured") -> None:
        super().__init__(message)


class InvalidApiKeyError(ExportError):
    """The destination rejected the API key (HTTP 401/403)."""

    code = ErrorCode.INVALID_API_KEY

    def __init__(self, message: str = "API key was rejected") -> None:
        super().__init__(message)


class ExportAPIError(ExportError):
    """A destination API call returned an error response."""

    code = ErrorCode.API_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExportValidationError(ExportError):
    """Workouts failed validation before upload."""

    code = ErrorCode.VALIDATION_ERROR


class ExportFailedError(ExportError):
    """Any other export failure."""

    code = ErrorCode.EXPORT_ERROR
