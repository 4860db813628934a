"""Store statistics schemas."""

from enum import Enum

from .base import BaseSchema


class EntityKind(str, Enum):
    user = "user"
    project = "project"
    task = "task"
    pomodoro_session = "pomodoro_session"
    analytics = "analytics"


class EntityCount(BaseSchema):
    kind: EntityKind
    count: int
