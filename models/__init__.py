"""
Models package initialization.
"""

from .analytics import Analytics
from .base import Base, BaseModel, DeletePolicy, TimestampedModel
from .pomodoro_session import PomodoroSession
from .project import DEFAULT_PROJECT_COLOR, Project
from .task import Task, TaskPriority, TaskStatus
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "TimestampedModel",
    "DeletePolicy",
    "User",
    "Project",
    "DEFAULT_PROJECT_COLOR",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "PomodoroSession",
    "Analytics",
]
