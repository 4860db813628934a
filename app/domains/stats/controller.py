"""Store statistics API controller."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.stats.service import StatsService
from app.schemas.base import ResponseSchema
from app.schemas.stats import EntityCount, EntityKind

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("/counts", response_model=ResponseSchema)
async def get_counts(db: AsyncSession = Depends(get_db)):
    """Row counts for every entity kind."""
    counts = await StatsService(db).counts()

    return ResponseSchema(
        status="success",
        message="Counts retrieved successfully",
        data={kind.value: total for kind, total in counts.items()},
    )


@router.get("/counts/{kind}", response_model=ResponseSchema)
async def get_count(
    kind: EntityKind = Path(..., description="Entity kind"),
    db: AsyncSession = Depends(get_db),
):
    """Row count for one entity kind."""
    total = await StatsService(db).count(kind)

    return ResponseSchema(
        status="success",
        message="Count retrieved successfully",
        data=EntityCount(kind=kind, count=total).model_dump(mode="json"),
    )
