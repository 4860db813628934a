"""
Analytics model holding per-user, per-day focus counters.
"""

from sqlalchemy import Column, Date, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import DeletePolicy, TimestampedModel, reference


class Analytics(TimestampedModel):
    """
    Daily aggregate for one user. At most one row exists per (user, date).
    """

    __tablename__ = "analytics"
    __table_args__ = (UniqueConstraint("user_id", "date", name="analytics_user_id_date_key"),)

    user_id = reference("users.id", DeletePolicy.CASCADE)
    date = Column(Date, nullable=False)
    tasks_completed = Column(Integer, nullable=False, default=0, server_default="0")
    pomodoro_sessions = Column(Integer, nullable=False, default=0, server_default="0")
    total_focus_time = Column(Integer, nullable=False, default=0, server_default="0")  # minutes

    user = relationship("User", back_populates="analytics")
