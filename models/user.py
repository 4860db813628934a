"""
Provides the User model, the root of every owned subgraph in the store.

Attributes
----------
email : sqlalchemy.Column
    The email address of the user, which must be unique.
name : sqlalchemy.Column
    Display name.
preferences : sqlalchemy.Column
    Free-form JSON map of user preferences (theme, language, ...).

Relationships
-------------
projects : sqlalchemy.orm.relationship
    One-to-many with `Project`. Deleting a user deletes its projects.
analytics : sqlalchemy.orm.relationship
    One-to-many with `Analytics`. Deleting a user deletes its analytics.
"""

from sqlalchemy import JSON, Column, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import TimestampedModel


class User(TimestampedModel):
    """
    Represents a user entity in the application.

    :ivar email: Email address of the user. It must be unique.
    :type email: str
    :ivar name: Display name of the user.
    :type name: str
    :ivar preferences: Arbitrary user preferences.
    :type preferences: dict | None
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="users_email_key"),)

    email = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    preferences = Column(JSON)

    # Rows are removed by the database's ON DELETE CASCADE; the ORM only
    # cascades to children it already has loaded.
    projects = relationship(
        "Project",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Project.created_at",
    )
    analytics = relationship(
        "Analytics",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Analytics.date",
    )
