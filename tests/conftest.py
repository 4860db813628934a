# tests/conftest.py
import os

# Set up test environment variables BEFORE any other imports
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import build_engine, build_session_factory, create_tables, get_db
from app.domains.pomodoro.service import PomodoroService
from app.domains.project.service import ProjectService
from app.domains.task.service import TaskService
from app.domains.user.service import UserService
from app.main import app
from app.schemas.pomodoro import PomodoroSessionCreate
from app.schemas.project import ProjectCreate
from app.schemas.task import TaskCreate
from app.schemas.user import UserCreate
from models.base import utcnow
from models.task import TaskPriority, TaskStatus


@pytest_asyncio.fixture
async def engine(tmp_path):
    """A fresh SQLite database file per test, with the schema created."""
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def test_db(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


@pytest_asyncio.fixture
async def client(session_factory):
    """Create a test client whose requests each get their own session."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# User fixtures
@pytest_asyncio.fixture
async def test_user(test_db):
    """Create a test user."""
    return await UserService(test_db).create_user(
        UserCreate(
            email="test@example.com",
            name="Test User",
            preferences={"theme": "dark", "language": "en"},
        )
    )


@pytest_asyncio.fixture
async def test_user_2(test_db):
    """Create a second test user."""
    return await UserService(test_db).create_user(
        UserCreate(email="test2@example.com", name="Second User")
    )


# Project fixtures
@pytest_asyncio.fixture
async def test_project(test_db, test_user):
    """Create a test project."""
    return await ProjectService(test_db).create_project(
        ProjectCreate(name="Test Project", description="A test project for validation"),
        test_user.id,
    )


@pytest_asyncio.fixture
async def test_project_2(test_db, test_user):
    """Create a second project for the same user."""
    return await ProjectService(test_db).create_project(
        ProjectCreate(name="Other Project", color="#FF5722"), test_user.id
    )


# Task fixtures
@pytest_asyncio.fixture
async def test_task(test_db, test_project):
    """Create a root task inside the test project."""
    return await TaskService(test_db).create_task(
        TaskCreate(
            title="Parent Task",
            description="A parent task for testing",
            priority=TaskPriority.HIGH,
            project_id=test_project.id,
            estimated_time=120,
        )
    )


@pytest_asyncio.fixture
async def test_subtask(test_db, test_project, test_task):
    """Create a subtask of ``test_task``."""
    return await TaskService(test_db).create_task(
        TaskCreate(
            title="Child Task",
            description="A subtask for testing hierarchy",
            status=TaskStatus.IN_PROGRESS,
            project_id=test_project.id,
            parent_id=test_task.id,
            estimated_time=60,
        )
    )


@pytest_asyncio.fixture
async def test_session(test_db, test_subtask):
    """Log a completed pomodoro session against ``test_subtask``."""
    started = utcnow()
    return await PomodoroService(test_db).create_session(
        PomodoroSessionCreate(
            task_id=test_subtask.id,
            duration=25,
            start_time=started,
            end_time=started + timedelta(minutes=25),
            completed=True,
            notes="Focused session",
        )
    )
