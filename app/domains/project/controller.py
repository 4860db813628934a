"""Project API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.project.service import ProjectService
from app.schemas.base import ResponseSchema
from app.schemas.project import ProjectWithTasks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("/{project_id}", response_model=ResponseSchema)
async def get_project(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a project with its tasks."""
    project = await ProjectService(db).get_project_with_tasks(project_id)

    return ResponseSchema(
        status="success",
        message="Project retrieved successfully",
        data=ProjectWithTasks.model_validate(project).model_dump(mode="json"),
    )


@router.delete("/{project_id}", response_model=ResponseSchema)
async def delete_project(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Delete a project and all of its tasks."""
    await ProjectService(db).delete_project(project_id)

    return ResponseSchema(status="success", message="Project deleted successfully", data=None)
