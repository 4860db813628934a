"""Task service layer with business logic."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.exceptions.base import ConstraintViolationError, CycleDetectedError
from app.exceptions.project import ProjectNotFoundError
from app.exceptions.task import CrossProjectParentError, TaskNotFoundError
from app.schemas.task import TaskCreate
from app.shared.timeutils import normalize_datetime
from models.project import Project
from models.task import Task

logger = logging.getLogger(__name__)


class TaskService:
    """Service class for task business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_task(self, task_data: TaskCreate) -> Task:
        """
        Create a new task, optionally under a project and/or a parent task.

        A subtask inherits its parent's project when none is given; naming a
        different project than the parent's is rejected.
        """
        project_id = task_data.project_id
        if project_id:
            await self._ensure_project_exists(project_id)

        if task_data.parent_id:
            parent = await self.get_task_by_id(task_data.parent_id)
            if not parent:
                raise TaskNotFoundError(
                    "Parent task not found", details={"parent_id": str(task_data.parent_id)}
                )
            # Walking the chain also rejects a parent that already sits in a loop
            await self._get_ancestor_ids(parent)

            if project_id is None:
                project_id = parent.project_id
            elif project_id != parent.project_id:
                raise CrossProjectParentError(
                    details={
                        "project_id": str(project_id),
                        "parent_project_id": str(parent.project_id) if parent.project_id else None,
                    }
                )

        task = Task(
            project_id=project_id,
            parent_id=task_data.parent_id,
            title=task_data.title,
            description=task_data.description,
            status=task_data.status.value,
            priority=task_data.priority.value,
            due_date=normalize_datetime(task_data.due_date),
            estimated_time=task_data.estimated_time,
            actual_time=task_data.actual_time,
        )

        try:
            self.db.add(task)
            await self.db.commit()
            await self.db.refresh(task)
        except IntegrityError as e:
            await self.db.rollback()
            raise ConstraintViolationError(f"Failed to create task: {e.orig}") from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created task {task.id} (project={project_id}, parent={task.parent_id})")
        return task

    async def get_task_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get a task by ID."""
        result = await self.db.execute(select(Task).where(Task.id == task_id))
        return result.scalar_one_or_none()

    async def get_task_with_hierarchy(self, task_id: UUID) -> Task:
        """Get a task with its subtasks (and their sessions) and its project."""
        query = (
            select(Task)
            .options(
                selectinload(Task.subtasks).selectinload(Task.pomodoro_sessions),
                selectinload(Task.project),
            )
            .where(Task.id == task_id)
            .execution_options(populate_existing=True)
        )

        result = await self.db.execute(query)
        task = result.scalar_one_or_none()
        if not task:
            raise TaskNotFoundError(details={"task_id": str(task_id)})
        return task

    async def move_task(self, task_id: UUID, parent_id: Optional[UUID]) -> Task:
        """
        Re-parent a task, or make it a root task when ``parent_id`` is None.

        The new parent must live in the same project and must not be the
        task itself or any of its descendants.
        """
        task = await self.get_task_by_id(task_id)
        if not task:
            raise TaskNotFoundError(details={"task_id": str(task_id)})

        if parent_id is not None:
            if parent_id == task_id:
                raise CycleDetectedError(
                    "A task cannot be its own parent", details={"task_id": str(task_id)}
                )

            parent = await self.get_task_by_id(parent_id)
            if not parent:
                raise TaskNotFoundError(
                    "Parent task not found", details={"parent_id": str(parent_id)}
                )

            if task_id in await self._get_ancestor_ids(parent):
                raise CycleDetectedError(
                    "A task cannot be moved under one of its own subtasks",
                    details={"task_id": str(task_id), "parent_id": str(parent_id)},
                )

            if parent.project_id != task.project_id:
                raise CrossProjectParentError(
                    details={"task_id": str(task_id), "parent_id": str(parent_id)}
                )

        task.parent_id = parent_id

        try:
            await self.db.commit()
            await self.db.refresh(task)
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Moved task {task_id} under parent {parent_id}")
        return task

    async def delete_task(self, task_id: UUID) -> None:
        """Delete a task and all its subtasks; sessions logged on them are detached."""

        task = await self.get_task_by_id(task_id)
        if not task:
            raise TaskNotFoundError(details={"task_id": str(task_id)})

        try:
            await self.db.delete(task)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        self.db.expunge_all()
        logger.info(f"Deleted task {task_id}")

    async def get_task_depth(self, task_id: UUID) -> int:
        """Number of ancestors above a task; root tasks have depth 0."""
        task = await self.get_task_by_id(task_id)
        if not task:
            raise TaskNotFoundError(details={"task_id": str(task_id)})
        return len(await self._get_ancestor_ids(task))

    # Private helper methods

    async def _get_ancestor_ids(self, task: Task) -> List[UUID]:
        """
        Collect the ids above ``task``, nearest parent first.

        Raises CycleDetectedError if the stored chain loops back on itself.
        """
        ancestors: List[UUID] = []
        seen = {task.id}
        current_id = task.parent_id

        while current_id is not None:
            if current_id in seen:
                raise CycleDetectedError(
                    "Stored task hierarchy contains a cycle",
                    details={"task_id": str(task.id), "repeated_id": str(current_id)},
                )
            seen.add(current_id)
            ancestors.append(current_id)

            result = await self.db.execute(select(Task.parent_id).where(Task.id == current_id))
            current_id = result.scalar_one_or_none()

        return ancestors

    async def _ensure_project_exists(self, project_id: UUID) -> None:
        result = await self.db.execute(select(Project.id).where(Project.id == project_id))
        if result.scalar_one_or_none() is None:
            raise ProjectNotFoundError(details={"project_id": str(project_id)})
