"""Project service layer with business logic."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.exceptions.base import ConstraintViolationError
from app.exceptions.project import ProjectNotFoundError
from app.exceptions.user import UserNotFoundError
from app.schemas.project import ProjectCreate
from models.project import Project
from models.task import Task
from models.user import User

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for project business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_project(self, project_data: ProjectCreate, user_id: UUID) -> Project:
        """Create a new project owned by ``user_id``."""

        await self._ensure_user_exists(user_id)

        project = Project(
            user_id=user_id,
            name=project_data.name,
            description=project_data.description,
            color=project_data.color,
        )

        try:
            self.db.add(project)
            await self.db.commit()
            await self.db.refresh(project)
        except IntegrityError as e:
            await self.db.rollback()
            raise ConstraintViolationError(f"Failed to create project: {e.orig}") from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created project {project.id} for user {user_id}")
        return project

    async def get_project_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get a project by ID."""
        result = await self.db.execute(select(Project).where(Project.id == project_id))
        return result.scalar_one_or_none()

    async def get_project_with_tasks(self, project_id: UUID) -> Project:
        """Get a project with its tasks, their subtasks and sessions."""

        stmt = (
            select(Project)
            .options(
                selectinload(Project.tasks).selectinload(Task.subtasks),
                selectinload(Project.tasks).selectinload(Task.pomodoro_sessions),
            )
            .where(Project.id == project_id)
            .execution_options(populate_existing=True)
        )

        result = await self.db.execute(stmt)
        project = result.scalar_one_or_none()
        if not project:
            raise ProjectNotFoundError(details={"project_id": str(project_id)})
        return project

    async def delete_project(self, project_id: UUID) -> None:
        """Delete a project; its tasks and their subtasks go with it."""

        project = await self.get_project_by_id(project_id)
        if not project:
            raise ProjectNotFoundError(details={"project_id": str(project_id)})

        try:
            await self.db.delete(project)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        self.db.expunge_all()
        logger.info(f"Deleted project {project_id}")

    # Private helper methods

    async def _ensure_user_exists(self, user_id: UUID) -> None:
        result = await self.db.execute(select(User.id).where(User.id == user_id))
        if result.scalar_one_or_none() is None:
            raise UserNotFoundError(details={"user_id": str(user_id)})
