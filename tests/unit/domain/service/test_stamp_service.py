"""Unit tests for StampService and streak computation."""

from datetime import date, timedelta

import pytest

from diu.domain.service import StampService
from diu.domain.service.stamp_service import compute_streak
from diu.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TODAY = date(2025, 6, 10)


def _days_ago(*offsets: int) -> list[date]:
    return [TODAY - timedelta(days=offset) for offset in offsets]


class TestComputeStreak:
    """Tests for compute_streak."""

    def test_no_stamps(self):
        assert compute_streak([], TODAY) == 0

    def test_streak_ending_today(self):
        """Consecutive days up to today count."""
        assert compute_streak(_days_ago(0, 1, 2), TODAY) == 3

    def test_streak_ending_yesterday_is_still_alive(self):
        """Not stamping yet today keeps yesterday's streak."""
        assert compute_streak(_days_ago(1, 2), TODAY) == 2

    def test_gap_breaks_streak(self):
        """Only the run touching today counts."""
        assert compute_streak(_days_ago(0, 2, 3, 4), TODAY) == 1

    def test_old_stamps_only(self):
        """A run that ended two days ago is broken."""
        assert compute_streak(_days_ago(2, 3), TODAY) == 0

    def test_duplicates_and_order_do_not_matter(self):
        assert compute_streak(_days_ago(1, 0, 1, 0), TODAY) == 2


class TestStampService:
    """Tests for recording stamps."""

    @pytest.mark.asyncio
    async def test_record_today_is_idempotent(self, unit_env):
        """A second stamp on the same day returns the first one."""
        # Arrange
        stamp_service = await unit_env.get(StampService)
        user_id = UserId("user-1")

        # Act
        first, first_created = await stamp_service.record_today(user_id)
        second, second_created = await stamp_service.record_today(user_id)

        # Assert
        assert first_created is True
        assert second_created is False
        assert second.id == first.id
        assert first.stamp_date == stamp_service.today()

    @pytest.mark.asyncio
    async def test_get_stamps_reports_streak(self, unit_env):
        """Today's stamp gives a streak of one."""
        stamp_service = await unit_env.get(StampService)
        user_id = UserId("user-1")
        await stamp_service.record_today(user_id)

        stamps, summary = await stamp_service.get_stamps(user_id)

        assert len(stamps) == 1
        assert summary.streak == 1
        assert summary.stamp_dates == [stamp_service.today()]

    @pytest.mark.asyncio
    async def test_get_stamps_for_new_user(self, unit_env):
        stamp_service = await unit_env.get(StampService)

        stamps, summary = await stamp_service.get_stamps(UserId("nobody"))

        assert stamps == []
        assert summary.streak == 0
