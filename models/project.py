"""
Project model for organizing tasks.
"""

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from .base import DeletePolicy, TimestampedModel, reference

DEFAULT_PROJECT_COLOR = "#3B82F6"


class Project(TimestampedModel):
    """
    Represents a project entity in the application.
    """

    __tablename__ = "projects"

    user_id = reference("users.id", DeletePolicy.CASCADE)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    color = Column(
        String(7),
        nullable=False,
        default=DEFAULT_PROJECT_COLOR,
        server_default=DEFAULT_PROJECT_COLOR,
    )

    # Relationships
    user = relationship("User", back_populates="projects")
    tasks = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Task.created_at",
    )
