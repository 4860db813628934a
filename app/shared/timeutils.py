"""Datetime helpers shared by the services."""

from datetime import datetime, timezone
from typing import Optional


def normalize_datetime(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to naive UTC, the storage convention of every column.

    Naive input is assumed to already be UTC; aware input is converted.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt

    return dt.astimezone(timezone.utc).replace(tzinfo=None)
