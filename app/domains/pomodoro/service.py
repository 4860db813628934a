"""Pomodoro session service layer."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.exceptions.base import ConstraintViolationError
from app.exceptions.pomodoro import PomodoroSessionNotFoundError
from app.exceptions.task import TaskNotFoundError
from app.schemas.pomodoro import PomodoroSessionComplete, PomodoroSessionCreate
from app.shared.timeutils import normalize_datetime
from models.base import utcnow
from models.pomodoro_session import PomodoroSession
from models.task import Task

logger = logging.getLogger(__name__)


class PomodoroService:
    """Service class for logging focus sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_session(self, session_data: PomodoroSessionCreate) -> PomodoroSession:
        """Log a session, optionally against an existing task."""

        if session_data.task_id is not None:
            result = await self.db.execute(select(Task.id).where(Task.id == session_data.task_id))
            if result.scalar_one_or_none() is None:
                raise TaskNotFoundError(details={"task_id": str(session_data.task_id)})

        pomodoro = PomodoroSession(
            task_id=session_data.task_id,
            duration=session_data.duration,
            start_time=normalize_datetime(session_data.start_time),
            end_time=normalize_datetime(session_data.end_time),
            completed=session_data.completed,
            notes=session_data.notes,
        )

        try:
            self.db.add(pomodoro)
            await self.db.commit()
            await self.db.refresh(pomodoro)
        except IntegrityError as e:
            await self.db.rollback()
            raise ConstraintViolationError(f"Failed to create pomodoro session: {e.orig}") from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Logged pomodoro session {pomodoro.id} for task {pomodoro.task_id}")
        return pomodoro

    async def get_session(self, session_id: UUID) -> Optional[PomodoroSession]:
        """Get a session by ID, always reading its current task reference."""
        query = (
            select(PomodoroSession)
            .where(PomodoroSession.id == session_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def complete_session(
        self, session_id: UUID, completion: PomodoroSessionComplete
    ) -> PomodoroSession:
        """Mark a session completed, closing it now unless an end time is given."""

        pomodoro = await self.get_session(session_id)
        if not pomodoro:
            raise PomodoroSessionNotFoundError(details={"session_id": str(session_id)})

        end_time = normalize_datetime(completion.end_time) or utcnow()
        if end_time < pomodoro.start_time:
            raise ConstraintViolationError(
                "end_time cannot be before start_time",
                details={"start_time": pomodoro.start_time.isoformat()},
            )

        pomodoro.end_time = end_time
        pomodoro.completed = True
        if completion.notes is not None:
            pomodoro.notes = completion.notes

        try:
            await self.db.commit()
            await self.db.refresh(pomodoro)
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Completed pomodoro session {session_id}")
        return pomodoro
