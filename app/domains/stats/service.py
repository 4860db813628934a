"""Row counts per entity kind, used to observe cascade results."""

from typing import Dict

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.schemas.stats import EntityKind
from models import Analytics, PomodoroSession, Project, Task, User

ENTITY_MODELS = {
    EntityKind.user: User,
    EntityKind.project: Project,
    EntityKind.task: Task,
    EntityKind.pomodoro_session: PomodoroSession,
    EntityKind.analytics: Analytics,
}


class StatsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def count(self, kind: EntityKind) -> int:
        """Total rows stored for one entity kind."""
        model = ENTITY_MODELS[EntityKind(kind)]
        result = await self.db.execute(select(func.count()).select_from(model))
        return result.scalar() or 0

    async def counts(self) -> Dict[EntityKind, int]:
        return {kind: await self.count(kind) for kind in EntityKind}
