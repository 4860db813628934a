"""Analytics service layer: one counters row per user and day."""

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.exceptions.analytics import DuplicateAnalyticsError
from app.exceptions.user import UserNotFoundError
from app.schemas.analytics import AnalyticsUpsert
from models.analytics import Analytics
from models.user import User

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Service class for daily analytics."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def upsert_analytics(self, user_id: UUID, data: AnalyticsUpsert) -> Analytics:
        """
        Insert the (user, date) row or overwrite its counters.

        The lookup and the write share one transaction. If a concurrent
        writer inserts the same key first, the unique index rejects the
        insert and the caller gets a DuplicateAnalyticsError.
        """
        await self._ensure_user_exists(user_id)

        analytics = await self.get_analytics(user_id, data.date)
        if analytics is None:
            analytics = Analytics(user_id=user_id, date=data.date)
            self.db.add(analytics)
            action = "Created"
        else:
            action = "Updated"

        analytics.tasks_completed = data.tasks_completed
        analytics.pomodoro_sessions = data.pomodoro_sessions
        analytics.total_focus_time = data.total_focus_time

        try:
            await self.db.commit()
            await self.db.refresh(analytics)
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateAnalyticsError(user_id, data.date) from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"{action} analytics for user {user_id} on {data.date.isoformat()}")
        return analytics

    async def create_analytics(self, user_id: UUID, data: AnalyticsUpsert) -> Analytics:
        """Insert-only path: an existing (user, date) row is a constraint violation."""
        await self._ensure_user_exists(user_id)

        if await self.get_analytics(user_id, data.date) is not None:
            raise DuplicateAnalyticsError(user_id, data.date)

        analytics = Analytics(
            user_id=user_id,
            date=data.date,
            tasks_completed=data.tasks_completed,
            pomodoro_sessions=data.pomodoro_sessions,
            total_focus_time=data.total_focus_time,
        )

        try:
            self.db.add(analytics)
            await self.db.commit()
            await self.db.refresh(analytics)
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateAnalyticsError(user_id, data.date) from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created analytics for user {user_id} on {data.date.isoformat()}")
        return analytics

    async def get_analytics(self, user_id: UUID, day: date) -> Optional[Analytics]:
        """Get the analytics row for one user and day."""
        query = select(Analytics).where(and_(Analytics.user_id == user_id, Analytics.date == day))
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_user_analytics(self, user_id: UUID) -> List[Analytics]:
        """All analytics rows of a user, oldest day first."""
        await self._ensure_user_exists(user_id)
        query = select(Analytics).where(Analytics.user_id == user_id).order_by(Analytics.date)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def _ensure_user_exists(self, user_id: UUID) -> None:
        result = await self.db.execute(select(User.id).where(User.id == user_id))
        if result.scalar_one_or_none() is None:
            raise UserNotFoundError(details={"user_id": str(user_id)})
