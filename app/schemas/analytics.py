"""Analytics schemas."""

from __future__ import annotations

import datetime as dt
from uuid import UUID

from pydantic import Field

from .base import BaseSchema, TimestampedModelSchema


class AnalyticsUpsert(BaseSchema):
    """Counters for one user and one calendar day."""

    date: dt.date
    tasks_completed: int = Field(default=0, ge=0)
    pomodoro_sessions: int = Field(default=0, ge=0)
    total_focus_time: int = Field(default=0, ge=0, description="Focus minutes")


class AnalyticsResponse(TimestampedModelSchema):
    """Schema for analytics response."""

    user_id: UUID
    date: dt.date
    tasks_completed: int
    pomodoro_sessions: int
    total_focus_time: int
