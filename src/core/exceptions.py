"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    TODO_NOT_FOUND = "TODO_NOT_FOUND"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"

    # Validation errors (422)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
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


class InvalidInputError(AppException):
    """Required input missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_INPUT,
            message=message,
            status_code=422,
            details={"field": field} if field else None,
        )


class TodoNotFoundError(AppException):
    """Todo not found."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(
            error_code=ErrorCode.TODO_NOT_FOUND,
            message="Todo not found",
            status_code=404,
            details={"todo_id": todo_id},
        )


class StorageUnavailableError(AppException):
    """The backing todo file cannot be read, parsed or written.

    ``path`` is kept on the exception for logging only; it is not part of
    the client-facing details.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(
            error_code=ErrorCode.STORAGE_UNAVAILABLE,
            message=f"Todo storage unavailable: {reason}",
            status_code=500,
            details={"reason": reason},
        )


class ToolNotFoundError(AppException):
    """No tool registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            error_code=ErrorCode.TOOL_NOT_FOUND,
            message=f"Tool not found: {name}",
            status_code=404,
            details={"tool": name},
        )
