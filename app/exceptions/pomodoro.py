"""Pomodoro session exceptions."""

from .base import NotFoundError


class PomodoroSessionNotFoundError(NotFoundError):
    """Raised when a pomodoro session is not found."""

    def __init__(self, message: str = "Pomodoro session not found", details: dict | None = None):
        super().__init__(message=message, details=details, error_code="POMODORO_SESSION_NOT_FOUND")
