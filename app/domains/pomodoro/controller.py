"""Pomodoro session API controller."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.pomodoro.service import PomodoroService
from app.exceptions.pomodoro import PomodoroSessionNotFoundError
from app.schemas.base import ResponseSchema
from app.schemas.pomodoro import (
    PomodoroSessionComplete,
    PomodoroSessionCreate,
    PomodoroSessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pomodoro-sessions", tags=["pomodoro"])


@router.post("/", response_model=ResponseSchema, status_code=201)
async def create_session(
    session_data: PomodoroSessionCreate,
    db: AsyncSession = Depends(get_db),
):
    """Log a pomodoro session."""
    pomodoro = await PomodoroService(db).create_session(session_data)

    return ResponseSchema(
        status="success",
        message="Pomodoro session created successfully",
        data=PomodoroSessionResponse.model_validate(pomodoro).model_dump(mode="json"),
    )


@router.get("/{session_id}", response_model=ResponseSchema)
async def get_session(
    session_id: UUID = Path(..., description="Pomodoro session ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a pomodoro session."""
    pomodoro = await PomodoroService(db).get_session(session_id)
    if not pomodoro:
        raise PomodoroSessionNotFoundError(details={"session_id": str(session_id)})

    return ResponseSchema(
        status="success",
        message="Pomodoro session retrieved successfully",
        data=PomodoroSessionResponse.model_validate(pomodoro).model_dump(mode="json"),
    )


@router.post("/{session_id}/complete", response_model=ResponseSchema)
async def complete_session(
    session_id: UUID = Path(..., description="Pomodoro session ID"),
    completion: PomodoroSessionComplete | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Mark a pomodoro session completed."""
    pomodoro = await PomodoroService(db).complete_session(
        session_id, completion or PomodoroSessionComplete()
    )

    return ResponseSchema(
        status="success",
        message="Pomodoro session completed",
        data=PomodoroSessionResponse.model_validate(pomodoro).model_dump(mode="json"),
    )
