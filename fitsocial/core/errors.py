# Application error taxonomy:
# ErrorCode values returned to clients in the error envelope
# AppError raised by services for every expected failure
# database_errors() to translate driver failures into DATABASE_ERROR

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    UNAUTHORIZED = "UNAUTHORIZED"
    TOKEN_INVALID = "TOKEN_INVALID"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_STATUS_CODES: Dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.TOKEN_INVALID: 401,
    ErrorCode.TOKEN_EXPIRED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.DATABASE_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}

ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "One or more fields have validation errors",
    ErrorCode.INVALID_INPUT: "The input provided is invalid",
    ErrorCode.UNAUTHORIZED: "You must be logged in to access this resource",
    ErrorCode.TOKEN_INVALID: "Invalid or malformed token",
    ErrorCode.TOKEN_EXPIRED: "Your session has expired. Please log in again",
    ErrorCode.FORBIDDEN: "You do not have permission to access this resource",
    ErrorCode.NOT_FOUND: "The requested resource was not found",
    ErrorCode.CONFLICT: "The operation cannot be completed due to a conflict",
    ErrorCode.DATABASE_ERROR: "A database error occurred. Please try again later",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again later",
}


class AppError(Exception):
    """Expected failure carrying a client-facing error code"""

    def __init__(self, code: ErrorCode, message: Optional[str] = None, details: Optional[Any] = None):
        self.code = code
        self.message = message or ERROR_MESSAGES[code]
        self.details = details
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES[self.code]


def code_for_status(status_code: int) -> ErrorCode:
    """Pick the error code reported for a bare HTTP status"""
    for code, status in ERROR_STATUS_CODES.items():
        if status == status_code:
            return code
    return ErrorCode.INTERNAL_ERROR if status_code >= 500 else ErrorCode.INVALID_INPUT


@contextmanager
def database_errors(action: str) -> Iterator[None]:
    """Re-raise driver failures as DATABASE_ERROR with the driver's message"""
    try:
        yield
    except SQLAlchemyError as e:
        message = str(getattr(e, "orig", None) or e)
        raise AppError(ErrorCode.DATABASE_ERROR, f"Failed to {action}: {message}") from e
