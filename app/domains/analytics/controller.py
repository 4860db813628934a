"""Analytics API controller."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.analytics.service import AnalyticsService
from app.schemas.analytics import AnalyticsResponse, AnalyticsUpsert
from app.schemas.base import ResponseSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}/analytics", tags=["analytics"])


@router.put("", response_model=ResponseSchema)
async def upsert_analytics(
    user_id: UUID = Path(..., description="User ID"),
    data: AnalyticsUpsert = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create or overwrite the analytics row for one day."""
    analytics = await AnalyticsService(db).upsert_analytics(user_id, data)

    return ResponseSchema(
        status="success",
        message="Analytics saved successfully",
        data=AnalyticsResponse.model_validate(analytics).model_dump(mode="json"),
    )


@router.get("", response_model=ResponseSchema)
async def list_analytics(
    user_id: UUID = Path(..., description="User ID"),
    db: AsyncSession = Depends(get_db),
):
    """List a user's analytics, oldest day first."""
    rows = await AnalyticsService(db).list_user_analytics(user_id)

    return ResponseSchema(
        status="success",
        message="Analytics retrieved successfully",
        data={
            "analytics": [
                AnalyticsResponse.model_validate(row).model_dump(mode="json") for row in rows
            ],
            "total": len(rows),
        },
    )
