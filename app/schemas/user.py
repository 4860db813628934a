"""User-related Pydantic schemas for request/response validation."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import EmailStr, Field, field_validator

from .base import BaseSchema, TimestampedModelSchema


class UserCreate(BaseSchema):
    """Schema for creating a user."""

    email: EmailStr = Field(..., description="User's email address")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    preferences: Optional[dict[str, Any]] = Field(None, description="Free-form preferences")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the display name is not blank."""
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty or only whitespace")
        return v


class UserResponse(TimestampedModelSchema):
    """Schema for user response data."""

    email: str
    name: str
    preferences: Optional[dict[str, Any]] = None


class UserGraph(UserResponse):
    """A user with every project, task, session and analytics row it owns."""

    projects: list[ProjectWithTasks] = []
    analytics: list[AnalyticsResponse] = []


from .analytics import AnalyticsResponse  # noqa: E402, I001
from .project import ProjectWithTasks  # noqa: E402, I001

UserGraph.model_rebuild()
