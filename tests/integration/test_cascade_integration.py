"""
Integration tests for the cascade rules of the owned graph.

Builds a user with a project, a parent task with a subtask, a pomodoro
session on the subtask and a day of analytics, then deletes from different
points in the graph and checks what is left.
"""

from datetime import date, timedelta

import pytest
from sqlalchemy import text

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

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def build_owned_graph(db, email):
    """Create one user's full graph and return the ids of every row."""
    user = await UserService(db).create_user(UserCreate(email=email, name="Graph Owner"))
    project = await ProjectService(db).create_project(ProjectCreate(name="Work"), user.id)
    tasks = TaskService(db)
    parent = await tasks.create_task(TaskCreate(title="Parent", project_id=project.id))
    child = await tasks.create_task(
        TaskCreate(title="Child", project_id=project.id, parent_id=parent.id)
    )
    started = utcnow()
    pomodoro = await PomodoroService(db).create_session(
        PomodoroSessionCreate(
            task_id=child.id,
            duration=25,
            start_time=started,
            end_time=started + timedelta(minutes=25),
            completed=True,
        )
    )
    analytics = await AnalyticsService(db).upsert_analytics(
        user.id, AnalyticsUpsert(date=date.today(), tasks_completed=1, pomodoro_sessions=1)
    )
    return {
        "user": user.id,
        "project": project.id,
        "parent": parent.id,
        "child": child.id,
        "session": pomodoro.id,
        "analytics": analytics.id,
    }


async def test_graph_read_matches_what_was_built(test_db):
    ids = await build_owned_graph(test_db, "owner@example.com")

    user = await UserService(test_db).get_user_with_graph(ids["user"])

    assert [p.id for p in user.projects] == [ids["project"]]
    tasks = user.projects[0].tasks
    assert [t.id for t in tasks] == [ids["parent"], ids["child"]]
    assert [t.id for t in tasks[0].subtasks] == [ids["child"]]
    assert [s.id for s in tasks[1].pomodoro_sessions] == [ids["session"]]
    assert [a.id for a in user.analytics] == [ids["analytics"]]


async def test_delete_user_removes_owned_graph(test_db):
    ids = await build_owned_graph(test_db, "owner@example.com")

    await UserService(test_db).delete_user(ids["user"])

    counts = await StatsService(test_db).counts()
    assert counts[EntityKind.user] == 0
    assert counts[EntityKind.project] == 0
    assert counts[EntityKind.task] == 0
    assert counts[EntityKind.analytics] == 0
    assert counts[EntityKind.pomodoro_session] == 1

    survivor = await PomodoroService(test_db).get_session(ids["session"])
    assert survivor.task_id is None
    assert survivor.completed is True


async def test_delete_user_leaves_other_users_alone(test_db):
    doomed = await build_owned_graph(test_db, "doomed@example.com")
    kept = await build_owned_graph(test_db, "kept@example.com")

    await UserService(test_db).delete_user(doomed["user"])

    counts = await StatsService(test_db).counts()
    assert counts == {
        EntityKind.user: 1,
        EntityKind.project: 1,
        EntityKind.task: 2,
        EntityKind.pomodoro_session: 2,
        EntityKind.analytics: 1,
    }
    graph = await UserService(test_db).get_user_with_graph(kept["user"])
    assert [t.id for t in graph.projects[0].tasks] == [kept["parent"], kept["child"]]
    kept_session = await PomodoroService(test_db).get_session(kept["session"])
    assert kept_session.task_id == kept["child"]


async def test_delete_parent_task_detaches_subtree_sessions(test_db):
    ids = await build_owned_graph(test_db, "owner@example.com")

    await TaskService(test_db).delete_task(ids["parent"])

    counts = await StatsService(test_db).counts()
    assert counts[EntityKind.task] == 0
    assert counts[EntityKind.project] == 1
    assert counts[EntityKind.analytics] == 1
    assert (await PomodoroService(test_db).get_session(ids["session"])).task_id is None


async def test_database_enforces_cascade_without_the_orm(test_db):
    """Deleting the user row with plain SQL still clears the whole graph."""
    ids = await build_owned_graph(test_db, "owner@example.com")

    await test_db.execute(text("DELETE FROM users WHERE id = :id"), {"id": str(ids["user"])})
    await test_db.commit()
    test_db.expunge_all()

    counts = await StatsService(test_db).counts()
    assert counts[EntityKind.project] == 0
    assert counts[EntityKind.task] == 0
    assert counts[EntityKind.analytics] == 0
    assert (await PomodoroService(test_db).get_session(ids["session"])).task_id is None


async def test_subtask_chain_deleted_with_root(test_db):
    ids = await build_owned_graph(test_db, "owner@example.com")
    tasks = TaskService(test_db)
    current = ids["child"]
    chain = []
    for depth in range(4):
        task = await tasks.create_task(TaskCreate(title=f"Level {depth + 2}", parent_id=current))
        chain.append(task.id)
        current = task.id

    assert await tasks.get_task_depth(current) == 5

    await tasks.delete_task(ids["parent"])

    for task_id in [ids["child"], *chain]:
        assert await tasks.get_task_by_id(task_id) is None
