"""Project schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from models.project import DEFAULT_PROJECT_COLOR

from .base import BaseSchema, TimestampedModelSchema

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class ProjectCreate(BaseSchema):
    """Schema for creating a new project."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    color: str = Field(default=DEFAULT_PROJECT_COLOR, pattern=HEX_COLOR_PATTERN)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate and clean the project name."""
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or only whitespace")
        return v


class ProjectResponse(TimestampedModelSchema):
    """Schema for project response."""

    user_id: UUID
    name: str
    description: str | None = None
    color: str


class ProjectWithTasks(ProjectResponse):
    """Schema for project with its tasks, each carrying subtasks and sessions."""

    tasks: list[TaskWithRelations] = []


# Import at the end to avoid circular imports
from .task import TaskWithRelations  # noqa: E402, I001

ProjectWithTasks.model_rebuild()
