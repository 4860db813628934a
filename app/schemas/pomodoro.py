"""Pomodoro session schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from app.shared.timeutils import normalize_datetime

from .base import BaseModelSchema, BaseSchema


class PomodoroSessionCreate(BaseSchema):
    """Schema for logging a pomodoro session."""

    task_id: UUID | None = None
    duration: int = Field(..., gt=0, description="Session length in minutes")
    start_time: datetime
    end_time: datetime | None = None
    completed: bool = False
    notes: str | None = None

    @model_validator(mode="after")
    def validate_time_range(self):
        # Naive and aware inputs are compared as naive UTC, as they are stored
        if self.end_time is None:
            return self
        if normalize_datetime(self.end_time) < normalize_datetime(self.start_time):
            raise ValueError("end_time cannot be before start_time")
        return self


class PomodoroSessionComplete(BaseSchema):
    """Schema for marking a session completed."""

    end_time: datetime | None = None
    notes: str | None = None


class PomodoroSessionResponse(BaseModelSchema):
    """Schema for pomodoro session response."""

    task_id: UUID | None = None
    duration: int
    start_time: datetime
    end_time: datetime | None = None
    completed: bool
    notes: str | None = None
