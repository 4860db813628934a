# app/domains/user/service.py
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions.base import ConstraintViolationError
from app.exceptions.user import DuplicateEmailError, UserNotFoundError
from app.schemas.user import UserCreate
from models import Project, Task, User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user(self, user_data: UserCreate) -> User:
        """Create a new user. Emails are unique across the store."""
        email = str(user_data.email)
        if await self.get_user_by_email(email):
            raise DuplicateEmailError(email)

        user = User(email=email, name=user_data.name, preferences=user_data.preferences)

        try:
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        except IntegrityError as e:
            await self.db.rollback()
            raise ConstraintViolationError(f"Failed to create user: {e.orig}") from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created user {user.id}")
        return user

    async def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        """Get a user by ID."""
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address."""
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_user_with_graph(self, user_id: UUID) -> User:
        """
        Load a user with everything it owns.

        Projects come with their tasks; every task carries its direct subtasks
        and its pomodoro sessions. Analytics rows are loaded alongside.
        """
        project_tasks = selectinload(User.projects).selectinload(Project.tasks)
        query = (
            select(User)
            .options(
                project_tasks.selectinload(Task.subtasks),
                project_tasks.selectinload(Task.pomodoro_sessions),
                selectinload(User.analytics),
            )
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        user = result.scalar_one_or_none()
        if not user:
            raise UserNotFoundError(details={"user_id": str(user_id)})
        return user

    async def delete_user(self, user_id: UUID) -> None:
        """
        Delete a user and all associated data.

        Projects, their tasks (with every subtask) and analytics go with the
        user; pomodoro sessions logged against those tasks are kept with a
        cleared task reference.
        """
        user = await self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError(details={"user_id": str(user_id)})

        try:
            await self.db.delete(user)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        # Cascades ran inside the database; drop in-memory copies of the rows
        # they removed or detached.
        self.db.expunge_all()
        logger.info(f"Deleted user {user_id} and its owned data")
