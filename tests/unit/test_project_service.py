"""
Unit tests for ProjectService.
"""

import uuid

import pytest

from app.domains.project.service import ProjectService
from app.domains.stats.service import StatsService
from app.domains.task.service import TaskService
from app.exceptions.base import NotFoundError
from app.exceptions.project import ProjectNotFoundError
from app.exceptions.user import UserNotFoundError
from app.schemas.project import ProjectCreate
from app.schemas.stats import EntityKind
from app.schemas.task import TaskCreate
from models import DEFAULT_PROJECT_COLOR


class TestProjectService:
    """Test cases for ProjectService."""

    @pytest.mark.asyncio
    async def test_create_project_success(self, test_db, test_user):
        """Test successful project creation."""
        service = ProjectService(test_db)

        project = await service.create_project(
            ProjectCreate(name="New Project", description="Desc", color="#FF5722"), test_user.id
        )

        assert project.name == "New Project"
        assert project.description == "Desc"
        assert project.color == "#FF5722"
        assert project.user_id == test_user.id

    @pytest.mark.asyncio
    async def test_create_project_default_color(self, test_db, test_user):
        """Omitting the color applies the default."""
        project = await ProjectService(test_db).create_project(
            ProjectCreate(name="Minimal Project"), test_user.id
        )

        assert project.color == DEFAULT_PROJECT_COLOR == "#3B82F6"
        assert project.description is None

    @pytest.mark.asyncio
    async def test_create_project_unknown_user(self, test_db):
        """Projects require an existing owner."""
        with pytest.raises(NotFoundError) as exc_info:
            await ProjectService(test_db).create_project(
                ProjectCreate(name="Orphan"), uuid.uuid4()
            )

        assert isinstance(exc_info.value, UserNotFoundError)
        assert await StatsService(test_db).count(EntityKind.project) == 0

    @pytest.mark.asyncio
    async def test_project_round_trip_in_new_session(self, session_factory, test_project):
        """A project read from a fresh session matches what was created."""
        async with session_factory() as other:
            loaded = await ProjectService(other).get_project_by_id(test_project.id)

        assert (loaded.name, loaded.description, loaded.color, loaded.user_id) == (
            test_project.name,
            test_project.description,
            test_project.color,
            test_project.user_id,
        )
        assert loaded.created_at == test_project.created_at

    @pytest.mark.asyncio
    async def test_get_project_with_tasks(self, test_db, test_project, test_task, test_subtask):
        """Projects load with all their tasks and each task's subtasks."""
        project = await ProjectService(test_db).get_project_with_tasks(test_project.id)

        assert [task.title for task in project.tasks] == ["Parent Task", "Child Task"]
        assert [sub.id for sub in project.tasks[0].subtasks] == [test_subtask.id]

    @pytest.mark.asyncio
    async def test_get_project_with_tasks_not_found(self, test_db):
        with pytest.raises(ProjectNotFoundError):
            await ProjectService(test_db).get_project_with_tasks(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_delete_project_cascades_to_tasks(
        self, test_db, test_user, test_project, test_project_2, test_task, test_subtask
    ):
        """Deleting a project removes its tasks but leaves other projects alone."""
        other_task = await TaskService(test_db).create_task(
            TaskCreate(title="Elsewhere", project_id=test_project_2.id)
        )

        await ProjectService(test_db).delete_project(test_project.id)

        stats = StatsService(test_db)
        assert await stats.count(EntityKind.project) == 1
        assert await stats.count(EntityKind.task) == 1
        assert await TaskService(test_db).get_task_by_id(test_subtask.id) is None
        assert (await TaskService(test_db).get_task_by_id(other_task.id)).title == "Elsewhere"
        assert await stats.count(EntityKind.user) == 1

    @pytest.mark.asyncio
    async def test_delete_nonexistent_project(self, test_db):
        with pytest.raises(ProjectNotFoundError):
            await ProjectService(test_db).delete_project(uuid.uuid4())
