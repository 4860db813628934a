"""User-related exceptions."""

from .base import ConstraintViolationError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, message: str = "User not found", details: dict | None = None):
        super().__init__(message=message, details=details, error_code="USER_NOT_FOUND")


class DuplicateEmailError(ConstraintViolationError):
    """Raised when creating a user with an email that is already registered."""

    def __init__(self, email: str):
        super().__init__(
            message="A user with this email already exists",
            details={"email": email},
            error_code="DUPLICATE_EMAIL",
        )
