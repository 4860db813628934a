"""
Unit tests for AnalyticsService.
"""

import uuid
from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from app.domains.analytics.service import AnalyticsService
from app.domains.stats.service import StatsService
from app.exceptions.analytics import DuplicateAnalyticsError
from app.exceptions.base import ConstraintViolationError
from app.exceptions.user import UserNotFoundError
from app.schemas.analytics import AnalyticsUpsert
from app.schemas.stats import EntityKind


class TestAnalyticsService:
    """Test cases for AnalyticsService."""

    @pytest.mark.asyncio
    async def test_upsert_creates_row(self, test_db, test_user):
        analytics = await AnalyticsService(test_db).upsert_analytics(
            test_user.id,
            AnalyticsUpsert(
                date=date(2030, 5, 1), tasks_completed=3, pomodoro_sessions=4, total_focus_time=100
            ),
        )

        assert analytics.user_id == test_user.id
        assert analytics.date == date(2030, 5, 1)
        assert (analytics.tasks_completed, analytics.pomodoro_sessions) == (3, 4)
        assert analytics.total_focus_time == 100

    @pytest.mark.asyncio
    async def test_upsert_defaults_counters_to_zero(self, test_db, test_user):
        analytics = await AnalyticsService(test_db).upsert_analytics(
            test_user.id, AnalyticsUpsert(date=date(2030, 5, 1))
        )

        assert (
            analytics.tasks_completed,
            analytics.pomodoro_sessions,
            analytics.total_focus_time,
        ) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_upsert_overwrites_existing_day(self, test_db, test_user):
        """A second upsert for the same day updates the row in place."""
        service = AnalyticsService(test_db)
        day = date(2030, 5, 1)
        first = await service.upsert_analytics(
            test_user.id, AnalyticsUpsert(date=day, tasks_completed=1)
        )

        second = await service.upsert_analytics(
            test_user.id, AnalyticsUpsert(date=day, tasks_completed=5, total_focus_time=75)
        )

        assert second.id == first.id
        assert second.tasks_completed == 5
        assert second.total_focus_time == 75
        assert await StatsService(test_db).count(EntityKind.analytics) == 1

    @pytest.mark.asyncio
    async def test_upsert_concurrent_insert_reports_duplicate(self, test_db, test_user):
        """If the row appears between lookup and insert, the unique key wins."""
        service = AnalyticsService(test_db)
        user_id = test_user.id
        day = date(2030, 5, 1)
        await service.upsert_analytics(user_id, AnalyticsUpsert(date=day))

        with patch.object(service, "get_analytics", AsyncMock(return_value=None)):
            with pytest.raises(DuplicateAnalyticsError) as exc_info:
                await service.upsert_analytics(user_id, AnalyticsUpsert(date=day))

        assert exc_info.value.details == {"user_id": str(user_id), "date": "2030-05-01"}
        assert await StatsService(test_db).count(EntityKind.analytics) == 1

    @pytest.mark.asyncio
    async def test_create_analytics_rejects_duplicate(self, test_db, test_user):
        service = AnalyticsService(test_db)
        day = date(2030, 5, 1)
        await service.create_analytics(test_user.id, AnalyticsUpsert(date=day, tasks_completed=2))

        with pytest.raises(ConstraintViolationError) as exc_info:
            await service.create_analytics(test_user.id, AnalyticsUpsert(date=day))

        assert exc_info.value.error_code == "DUPLICATE_ANALYTICS"
        assert (await service.get_analytics(test_user.id, day)).tasks_completed == 2

    @pytest.mark.asyncio
    async def test_same_day_for_different_users(self, test_db, test_user, test_user_2):
        service = AnalyticsService(test_db)
        day = date(2030, 5, 1)

        await service.create_analytics(test_user.id, AnalyticsUpsert(date=day))
        await service.create_analytics(test_user_2.id, AnalyticsUpsert(date=day))

        assert await StatsService(test_db).count(EntityKind.analytics) == 2

    @pytest.mark.asyncio
    async def test_unknown_user(self, test_db):
        service = AnalyticsService(test_db)
        payload = AnalyticsUpsert(date=date(2030, 5, 1))

        with pytest.raises(UserNotFoundError):
            await service.upsert_analytics(uuid.uuid4(), payload)
        with pytest.raises(UserNotFoundError):
            await service.create_analytics(uuid.uuid4(), payload)
        with pytest.raises(UserNotFoundError):
            await service.list_user_analytics(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_get_analytics_missing(self, test_db, test_user):
        assert await AnalyticsService(test_db).get_analytics(test_user.id, date(2030, 1, 1)) is None

    @pytest.mark.asyncio
    async def test_list_user_analytics_sorted_by_date(self, test_db, test_user, test_user_2):
        service = AnalyticsService(test_db)
        for day in (date(2030, 5, 3), date(2030, 5, 1), date(2030, 5, 2)):
            await service.upsert_analytics(test_user.id, AnalyticsUpsert(date=day))
        await service.upsert_analytics(test_user_2.id, AnalyticsUpsert(date=date(2030, 5, 1)))

        rows = await service.list_user_analytics(test_user.id)

        assert [row.date for row in rows] == [date(2030, 5, 1), date(2030, 5, 2), date(2030, 5, 3)]
