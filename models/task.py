"""
A module defining the `Task` ORM model.

Tasks form a forest inside a flat table: each row optionally points at a
parent row through ``parent_id``. Deleting a parent deletes its subtasks,
deleting a project deletes its tasks, and deleting a task only detaches the
pomodoro sessions that were logged against it.

Classes:
    TaskStatus: Enumerated workflow state of a task.
    TaskPriority: Enumerated priority of a task.
    Task: A single task with optional project, parent and subtasks.
"""

from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import backref, relationship

from .base import DeletePolicy, TimestampedModel, reference


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class Task(TimestampedModel):
    __tablename__ = "tasks"

    project_id = reference("projects.id", DeletePolicy.CASCADE, nullable=True)
    parent_id = reference("tasks.id", DeletePolicy.CASCADE, nullable=True)

    title = Column(String(500), nullable=False)
    description = Column(Text)
    status = Column(
        String(20),
        nullable=False,
        default=TaskStatus.TODO.value,
        server_default=TaskStatus.TODO.value,
    )
    priority = Column(
        String(20),
        nullable=False,
        default=TaskPriority.MEDIUM.value,
        server_default=TaskPriority.MEDIUM.value,
    )
    due_date = Column(DateTime)
    estimated_time = Column(Integer)  # minutes
    actual_time = Column(Integer)  # minutes

    # Relationships
    project = relationship("Project", back_populates="tasks")
    subtasks = relationship(
        "Task",
        backref=backref("parent", remote_side="Task.id"),
        foreign_keys=[parent_id],
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Task.created_at",
    )
    pomodoro_sessions = relationship(
        "PomodoroSession",
        back_populates="task",
        passive_deletes=True,
        order_by="PomodoroSession.start_time",
    )
