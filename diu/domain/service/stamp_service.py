"""Daily stamp domain service."""

from datetime import date, datetime, timedelta
from uuid import uuid4
from zoneinfo import ZoneInfo

import logfire
from sqlalchemy.exc import IntegrityError

from diu.config import StampSettings
from diu.domain.model.common import utc_now
from diu.domain.model.stamp import DailyStamp
from diu.domain.repository import StampRepository
from diu.domain.value import StampId, StampSummary, UserId

from .base import Service


def compute_streak(stamp_dates: list[date], today: date) -> int:
    """Count consecutive stamped days ending today or yesterday.

    A streak that ended yesterday is still alive until today is over.

    Args:
        stamp_dates: Stamped days in any order, duplicates allowed
        today: Current calendar day

    Returns:
        Length of the current streak (0 if broken)
    """
    stamped = set(stamp_dates)
    if today in stamped:
        day = today
    elif today - timedelta(days=1) in stamped:
        day = today - timedelta(days=1)
    else:
        return 0

    streak = 0
    while day in stamped:
        streak += 1
        day -= timedelta(days=1)
    return streak


class StampService(Service):
    """Domain service for daily engagement stamps."""

    def __init__(
        self, stamp_repository: StampRepository, stamp_settings: StampSettings
    ) -> None:
        """Initialize stamp service.

        Args:
            stamp_repository: Stamp repository
            stamp_settings: Stamp settings (timezone of "today")
        """
        self.stamp_repository = stamp_repository
        self.timezone = ZoneInfo(stamp_settings.timezone)

    def today(self) -> date:
        """Current calendar day in the configured timezone."""
        return datetime.now(self.timezone).date()

    async def record_today(self, user_id: UserId) -> tuple[DailyStamp, bool]:
        """Stamp today for the user; a second call the same day is a no-op.

        Args:
            user_id: User ID

        Returns:
            The day's stamp and whether it was created by this call
        """
        today = self.today()
        with logfire.span(
            "stamp_service.record_today", user_id=str(user_id), date=today.isoformat()
        ):
            existing = await self.stamp_repository.find_by_user_and_date(user_id, today)
            if existing:
                return existing, False

            stamp = DailyStamp(
                id=StampId(uuid4()),
                user_id=user_id,
                stamp_date=today,
                created_at=utc_now(),
            )
            try:
                saved = await self.stamp_repository.save(stamp)
            except IntegrityError:
                # Stamped by a concurrent request
                concurrent = await self.stamp_repository.find_by_user_and_date(
                    user_id, today
                )
                if concurrent is None:
                    raise
                return concurrent, False

            logfire.info("Daily stamp recorded", user_id=str(user_id))
            return saved, True

    async def get_stamps(self, user_id: UserId) -> tuple[list[DailyStamp], StampSummary]:
        """Get a user's stamps (newest day first) with the current streak."""
        with logfire.span("stamp_service.get_stamps", user_id=str(user_id)):
            stamps = await self.stamp_repository.find_by_user(user_id)
            dates = [stamp.stamp_date for stamp in stamps]
            summary = StampSummary(
                stamp_dates=dates, streak=compute_streak(dates, self.today())
            )
            logfire.info(
                "User stamps retrieved",
                user_id=str(user_id),
                count=len(stamps),
                streak=summary.streak,
            )
            return stamps, summary
