"""Unit tests for the stamp use cases."""

import pytest

from diu.application.usecase.stamp import GetMyStampsUseCase, StampTodayUseCase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestStampUseCases:
    """Tests for stamping today and listing stamps."""

    @pytest.mark.asyncio
    async def test_stamp_today_then_list(self, unit_env):
        stamp_today = await unit_env.get(StampTodayUseCase)
        get_stamps = await unit_env.get(GetMyStampsUseCase)

        first = await stamp_today.execute("user-1")
        again = await stamp_today.execute("user-1")
        listing = await get_stamps.execute("user-1")

        assert first.created is True
        assert again.created is False
        assert again.stamp.stamp_date == first.stamp.stamp_date
        assert listing.total == 1
        assert listing.streak == 1
        assert [s.stamp_date for s in listing.stamps] == [first.stamp.stamp_date]

    @pytest.mark.asyncio
    async def test_no_stamps(self, unit_env):
        get_stamps = await unit_env.get(GetMyStampsUseCase)

        listing = await get_stamps.execute("user-1")

        assert listing.stamps == []
        assert listing.streak == 0
        assert listing.total == 0
