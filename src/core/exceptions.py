"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Transient errors (503)
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, wallet_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {wallet_id}",
            status_code=404,
            details={"wallet_id": wallet_id},
        )


class StorageUnavailableError(AppException):
    """The profile store or view ledger could not be reached.

    The underlying driver error is kept as ``__cause__`` for logging;
    callers only ever see this coarse kind.
    """

    def __init__(self, message: str = "Storage is temporarily unavailable") -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_UNAVAILABLE,
            message=message,
            status_code=503,
        )
