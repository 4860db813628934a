# ruff: noqa: D107
"""Base exception classes.

The store reports three kinds of failure: a referenced entity is missing
(``NotFoundError``), a uniqueness or required-field rule is broken
(``ConstraintViolationError``), or a task hierarchy would stop being a forest
(``CycleDetectedError``). Each carries an HTTP status so the API layer can
render it without translation.
"""

from typing import Any

from fastapi import HTTPException


class BaseAppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(
            status_code=status_code,
            detail={"message": message, "error_code": error_code, "details": self.details},
        )

    def __str__(self) -> str:
        return self.message


class NotFoundError(BaseAppException):
    """Exception raised when a referenced entity does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: dict[str, Any] | None = None,
        error_code: str = "NOT_FOUND",
    ):
        super().__init__(message=message, status_code=404, error_code=error_code, details=details)


class ConstraintViolationError(BaseAppException):
    """Exception raised when a unique-key or required-field rule is violated."""

    def __init__(
        self,
        message: str = "Constraint violation",
        details: dict[str, Any] | None = None,
        error_code: str = "CONSTRAINT_VIOLATION",
    ):
        super().__init__(message=message, status_code=409, error_code=error_code, details=details)


class CycleDetectedError(BaseAppException):
    """Exception raised when a parent reference would make a task its own ancestor."""

    def __init__(
        self,
        message: str = "Task hierarchy cycle detected",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CYCLE_DETECTED",
            details=details,
        )
