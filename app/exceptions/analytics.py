"""Analytics-related exceptions."""

from .base import ConstraintViolationError


class DuplicateAnalyticsError(ConstraintViolationError):
    """Raised when inserting a second analytics row for the same user and date."""

    def __init__(self, user_id, date):
        super().__init__(
            message="Analytics for this user and date already exist",
            details={"user_id": str(user_id), "date": date.isoformat()},
            error_code="DUPLICATE_ANALYTICS",
        )
