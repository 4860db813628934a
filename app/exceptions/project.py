"""Project-related exceptions."""

from .base import NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when a project is not found."""

    def __init__(self, message: str = "Project not found", details: dict | None = None):
        super().__init__(message=message, details=details, error_code="PROJECT_NOT_FOUND")
