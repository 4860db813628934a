"""
PomodoroSession model: a timed focus session, optionally logged against a task.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, Text, false
from sqlalchemy.orm import relationship

from .base import BaseModel, DeletePolicy, reference


class PomodoroSession(BaseModel):
    """
    Represents one focus session.

    The task reference is soft: when the task goes away the session is kept
    and its ``task_id`` is cleared.
    """

    __tablename__ = "pomodoro_sessions"

    task_id = reference("tasks.id", DeletePolicy.SET_NULL, nullable=True)
    duration = Column(Integer, nullable=False)  # minutes
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())
    notes = Column(Text)

    task = relationship("Task", back_populates="pomodoro_sessions")
