"""Task schemas for request/response serialization."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from models.task import TaskPriority, TaskStatus

from .base import BaseSchema, TimestampedModelSchema
from .pomodoro import PomodoroSessionResponse


class TaskCreate(BaseSchema):
    """Schema for creating a new task."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = None
    estimated_time: int | None = Field(None, ge=0, description="Estimate in minutes")
    actual_time: int | None = Field(None, ge=0, description="Time spent in minutes")
    project_id: UUID | None = None
    parent_id: UUID | None = None


class TaskMove(BaseSchema):
    """Schema for re-parenting a task. A null parent makes it a root task."""

    parent_id: UUID | None = None


class TaskResponse(TimestampedModelSchema):
    """Schema for task response."""

    project_id: UUID | None = None
    parent_id: UUID | None = None
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime | None = None
    estimated_time: int | None = None
    actual_time: int | None = None


class TaskWithSessions(TaskResponse):
    """Task with the pomodoro sessions logged against it."""

    pomodoro_sessions: list[PomodoroSessionResponse] = []


class TaskWithRelations(TaskWithSessions):
    """Task with its direct subtasks and its sessions."""

    subtasks: list[TaskResponse] = []


class TaskHierarchy(TaskResponse):
    """Task with subtasks (each with sessions) and its project."""

    subtasks: list[TaskWithSessions] = []
    project: ProjectResponse | None = None


from .project import ProjectResponse  # noqa: E402, I001

TaskHierarchy.model_rebuild()
