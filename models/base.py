"""
Defines the declarative base and shared column helpers for the task store.

Every table uses a UUID primary key generated client-side and naive UTC
timestamps. Foreign keys are declared through :func:`reference`, which tags
each relationship with an explicit :class:`DeletePolicy` so the cascade
rules of the graph read directly off the model definitions.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, String, TypeDecorator, func
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the storage convention for all timestamps."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class DeletePolicy(str, Enum):
    """What happens to a dependent row when the row it references is deleted."""

    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"


class UUID(TypeDecorator):
    """
    Platform-independent UUID type.
    Uses PostgreSQL's UUID type when available,
    otherwise uses CHAR(36), storing as string.
    """
    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PostgreSQLUUID(as_uuid=True))
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name == "postgresql":
            return value
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


def reference(target: str, policy: DeletePolicy, nullable: bool = False) -> Column:
    """
    Build a foreign key column pointing at ``target`` with the given delete policy.

    A ``SET_NULL`` policy on a non-nullable column can never be honoured, so
    that combination is rejected when the model is declared.
    """
    if policy is DeletePolicy.SET_NULL and not nullable:
        raise ValueError(f"SET NULL delete policy requires a nullable column ({target})")
    return Column(
        UUID(),
        ForeignKey(target, ondelete=policy.value),
        nullable=nullable,
        index=True,
        info={"delete_policy": policy},
    )


class BaseModel(Base):
    """
    Base model class for database entities.

    :ivar id: Unique identifier for the record.
    :type id: UUID
    :ivar created_at: Timestamp representing when the record was created.
    :type created_at: datetime
    """
    __abstract__ = True

    id = Column(UUID(), primary_key=True, default=uuid.uuid4)
    created_at = Column(
        DateTime, nullable=False, default=utcnow, server_default=func.current_timestamp()
    )


class TimestampedModel(BaseModel):
    """
    Base model for entities that also track their last modification.

    :ivar updated_at: Timestamp representing when the record was last updated.
    :type updated_at: datetime
    """
    __abstract__ = True

    updated_at = Column(
        DateTime,
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=func.current_timestamp(),
    )
