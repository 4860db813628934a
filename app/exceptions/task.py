"""Task-related exceptions."""

from .base import ConstraintViolationError, NotFoundError


class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    def __init__(self, message: str = "Task not found", details: dict | None = None):
        super().__init__(message=message, details=details, error_code="TASK_NOT_FOUND")


class CrossProjectParentError(ConstraintViolationError):
    """Raised when a subtask and its parent would belong to different projects."""

    def __init__(
        self,
        message: str = "A subtask must belong to its parent's project",
        details: dict | None = None,
    ):
        super().__init__(message=message, details=details, error_code="CROSS_PROJECT_PARENT")
