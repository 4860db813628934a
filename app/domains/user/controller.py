"""User API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.project.service import ProjectService
from app.domains.user.service import UserService
from app.exceptions.user import UserNotFoundError
from app.schemas.base import ResponseSchema
from app.schemas.project import ProjectCreate, ProjectResponse
from app.schemas.user import UserCreate, UserGraph, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/", response_model=ResponseSchema, status_code=201)
async def create_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new user."""
    user = await UserService(db).create_user(user_data)

    return ResponseSchema(
        status="success",
        message="User created successfully",
        data=UserResponse.model_validate(user).model_dump(mode="json"),
    )


@router.get("/{user_id}", response_model=ResponseSchema)
async def get_user(
    user_id: UUID = Path(..., description="User ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a user by ID."""
    user = await UserService(db).get_user_by_id(user_id)
    if not user:
        raise UserNotFoundError(details={"user_id": str(user_id)})

    return ResponseSchema(
        status="success",
        message="User retrieved successfully",
        data=UserResponse.model_validate(user).model_dump(mode="json"),
    )


@router.get("/{user_id}/graph", response_model=ResponseSchema)
async def get_user_graph(
    user_id: UUID = Path(..., description="User ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a user with its projects, tasks, subtasks, sessions and analytics."""
    user = await UserService(db).get_user_with_graph(user_id)

    return ResponseSchema(
        status="success",
        message="User graph retrieved successfully",
        data=UserGraph.model_validate(user).model_dump(mode="json"),
    )


@router.delete("/{user_id}", response_model=ResponseSchema)
async def delete_user(
    user_id: UUID = Path(..., description="User ID"),
    db: AsyncSession = Depends(get_db),
):
    """Delete a user and everything it owns."""
    await UserService(db).delete_user(user_id)

    return ResponseSchema(status="success", message="User deleted successfully", data=None)


@router.post("/{user_id}/projects", response_model=ResponseSchema, status_code=201)
async def create_project(
    project_data: ProjectCreate,
    user_id: UUID = Path(..., description="Owner user ID"),
    db: AsyncSession = Depends(get_db),
):
    """Create a project owned by a user."""
    project = await ProjectService(db).create_project(project_data, user_id)

    return ResponseSchema(
        status="success",
        message="Project created successfully",
        data=ProjectResponse.model_validate(project).model_dump(mode="json"),
    )
