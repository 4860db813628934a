"""Task API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.task.service import TaskService
from app.schemas.base import ResponseSchema
from app.schemas.task import TaskCreate, TaskHierarchy, TaskMove, TaskResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post("/", response_model=ResponseSchema, status_code=201)
async def create_task(
    task_data: TaskCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new task, optionally as a subtask."""
    task = await TaskService(db).create_task(task_data)

    return ResponseSchema(
        status="success",
        message="Task created successfully",
        data=TaskResponse.model_validate(task).model_dump(mode="json"),
    )


@router.get("/{task_id}", response_model=ResponseSchema)
async def get_task(
    task_id: UUID = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a task with its subtasks, their sessions, and its project."""
    task = await TaskService(db).get_task_with_hierarchy(task_id)

    return ResponseSchema(
        status="success",
        message="Task retrieved successfully",
        data=TaskHierarchy.model_validate(task).model_dump(mode="json"),
    )


@router.patch("/{task_id}/parent", response_model=ResponseSchema)
async def move_task(
    task_id: UUID = Path(..., description="Task ID"),
    move: TaskMove = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Attach a task to a new parent, or detach it to the top level."""
    task = await TaskService(db).move_task(task_id, move.parent_id)

    return ResponseSchema(
        status="success",
        message="Task moved successfully",
        data=TaskResponse.model_validate(task).model_dump(mode="json"),
    )


@router.delete("/{task_id}", response_model=ResponseSchema)
async def delete_task(
    task_id: UUID = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
):
    """Delete a task and all its subtasks."""
    await TaskService(db).delete_task(task_id)

    return ResponseSchema(status="success", message="Task deleted successfully", data=None)
