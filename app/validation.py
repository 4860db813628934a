#!/usr/bin/env python3
"""
Database validation harness.

Runs one end-to-end pass over the store against a real database: creates a
user, a project, a parent task with a subtask, a pomodoro session on the
subtask and a day of analytics, reads the graph back, then deletes the user
and checks that the cascade removed everything it owned while the session
survived with its task reference cleared.

Usage:
    python -m app.validation [--database-url URL]

Exits 0 when every step passes and 1 on the first failure.
"""

import argparse
import asyncio
import logging
import sys
import uuid
from datetime import date, timedelta
from typing import Dict, Optional

from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import settings
from app.core.logging_setup import setup_logging
from app.database import build_engine, build_session_factory, create_tables, session_scope
from app.domains.analytics.service import AnalyticsService
from app.domains.pomodoro.service import PomodoroService
from app.domains.project.service import ProjectService
from app.domains.stats.service import StatsService
from app.domains.task.service import TaskService
from app.domains.user.service import UserService
from app.schemas.analytics import AnalyticsUpsert
from app.schemas.pomodoro import PomodoroSessionCreate
from app.schemas.project import ProjectCreate
from app.schemas.stats import EntityKind
from app.schemas.task import TaskCreate
from app.schemas.user import UserCreate
from models.base import utcnow
from models.task import TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

CASCADED_KINDS = (EntityKind.project, EntityKind.task, EntityKind.analytics)


class ValidationFailure(AssertionError):
    """Raised when the store does not behave as expected."""


class ValidationReport(BaseModel):
    """What the harness observed."""

    user_id: Optional[uuid.UUID] = None
    graph: Dict[str, int] = Field(default_factory=dict)
    remaining: Dict[str, int] = Field(default_factory=dict)
    session_task_cleared: bool = False


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationFailure(message)


async def run_validation(engine: AsyncEngine) -> ValidationReport:
    """Run the scenario on ``engine``. Raises on the first failed step."""
    report = ValidationReport()
    session_factory = build_session_factory(engine)

    async with session_scope(session_factory) as db:
        stats = StatsService(db)
        baseline = {kind: await stats.count(kind) for kind in CASCADED_KINDS}

        logger.info("1. Testing User operations...")
        user = await UserService(db).create_user(
            UserCreate(
                email=f"validation-{uuid.uuid4().hex[:12]}@example.com",
                name="Test User",
                preferences={"theme": "dark", "language": "en"},
            )
        )
        report.user_id = user.id
        logger.info(f"User created: {user.id}")

        logger.info("2. Testing Project operations...")
        project = await ProjectService(db).create_project(
            ProjectCreate(
                name="Test Project",
                description="A test project for validation",
                color="#FF5722",
            ),
            user.id,
        )
        logger.info(f"Project created: {project.id}")

        logger.info("3. Testing Task operations with hierarchy...")
        tasks = TaskService(db)
        parent_task = await tasks.create_task(
            TaskCreate(
                title="Parent Task",
                description="A parent task for testing",
                status=TaskStatus.TODO,
                priority=TaskPriority.HIGH,
                project_id=project.id,
                estimated_time=120,
            )
        )
        logger.info(f"Parent task created: {parent_task.id}")

        child_task = await tasks.create_task(
            TaskCreate(
                title="Child Task",
                description="A subtask for testing hierarchy",
                status=TaskStatus.IN_PROGRESS,
                priority=TaskPriority.MEDIUM,
                project_id=project.id,
                parent_id=parent_task.id,
                estimated_time=60,
            )
        )
        logger.info(f"Child task created: {child_task.id}")

        logger.info("4. Testing PomodoroSession operations...")
        started = utcnow()
        pomodoro = await PomodoroService(db).create_session(
            PomodoroSessionCreate(
                task_id=child_task.id,
                duration=25,
                start_time=started,
                end_time=started + timedelta(minutes=25),
                completed=True,
                notes="Focused session",
            )
        )
        logger.info(f"Pomodoro session created: {pomodoro.id}")

        logger.info("5. Testing Analytics operations...")
        analytics = await AnalyticsService(db).upsert_analytics(
            user.id,
            AnalyticsUpsert(
                date=date.today(),
                tasks_completed=1,
                pomodoro_sessions=1,
                total_focus_time=25,
            ),
        )
        logger.info(f"Analytics record created: {analytics.id}")

        logger.info("6. Testing relationship queries...")
        graph = await UserService(db).get_user_with_graph(user.id)
        project_tasks = {
            task.id: task for graph_project in graph.projects for task in graph_project.tasks
        }
        graph_parent = project_tasks.get(parent_task.id)
        graph_child = project_tasks.get(child_task.id)
        report.graph = {
            "projects": len(graph.projects),
            "tasks": len(project_tasks),
            "subtasks": len(graph_parent.subtasks) if graph_parent else 0,
            "pomodoro_sessions": len(graph_child.pomodoro_sessions) if graph_child else 0,
            "analytics": len(graph.analytics),
        }
        for name, total in report.graph.items():
            logger.info(f"   - {name}: {total}")
        _check(
            report.graph
            == {"projects": 1, "tasks": 2, "subtasks": 1, "pomodoro_sessions": 1, "analytics": 1},
            f"Unexpected user graph: {report.graph}",
        )

        hierarchy = await tasks.get_task_with_hierarchy(parent_task.id)
        logger.info(
            f"Task hierarchy validated: {hierarchy.title}, "
            f"{len(hierarchy.subtasks)} subtask(s), project {hierarchy.project.name}"
        )
        _check(len(hierarchy.subtasks) == 1, "Parent task should have exactly one subtask")
        _check(hierarchy.project.id == project.id, "Parent task should belong to the project")

        logger.info("7. Testing cascade delete behavior...")
        await UserService(db).delete_user(user.id)

        remaining = {kind: await stats.count(kind) for kind in CASCADED_KINDS}
        report.remaining = {
            kind.value: remaining[kind] - baseline[kind] for kind in CASCADED_KINDS
        }
        for name, total in report.remaining.items():
            logger.info(f"   - Remaining {name}: {total}")
        _check(
            all(total == 0 for total in report.remaining.values()),
            f"Cascade left rows behind: {report.remaining}",
        )

        surviving = await PomodoroService(db).get_session(pomodoro.id)
        _check(surviving is not None, "Pomodoro session should survive task deletion")
        report.session_task_cleared = surviving.task_id is None
        _check(report.session_task_cleared, "Pomodoro session should have its task cleared")

    return report


async def _run(database_url: str) -> int:
    engine = build_engine(database_url, echo=settings.debug)
    try:
        await create_tables(engine)
        logger.info("Starting database CRUD validation tests...")
        await run_validation(engine)
        logger.info("All database tests passed successfully!")
        return 0
    except Exception as e:
        logger.error(
            f"Database validation failed: {e}", exc_info=not isinstance(e, ValidationFailure)
        )
        return 1
    finally:
        await engine.dispose()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate task store CRUD and cascade behavior")
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy async database URL (default: settings.database_url)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging()
    exit_code = asyncio.run(_run(args.database_url))
    if exit_code == 0:
        logger.info("Database validation completed")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
