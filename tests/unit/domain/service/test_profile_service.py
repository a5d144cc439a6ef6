"""Unit tests for ProfileService."""

import pytest

from diu.domain.error import ConflictError, NotFoundError, ValidationError
from diu.domain.service import ProfileService
from diu.domain.service.profile_service import parse_username
from diu.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestParseUsername:
    """Tests for parse_username."""

    def test_valid_username_is_trimmed(self):
        assert parse_username("  angry_cat ").root == "angry_cat"

    @pytest.mark.parametrize("raw", ["", "ab", "a" * 21, "has space", "dash-name"])
    def test_invalid_usernames(self, raw):
        with pytest.raises(ValidationError):
            parse_username(raw)


class TestSetupUsername:
    """Tests for setup_username."""

    @pytest.mark.asyncio
    async def test_setup_creates_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.setup_username(UserId("user-1"), "angry_cat")

        assert profile.user_id == "user-1"
        assert profile.username.root == "angry_cat"
        assert profile.bio is None

    @pytest.mark.asyncio
    async def test_second_setup_for_same_user_conflicts(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.setup_username(UserId("user-1"), "angry_cat")

        with pytest.raises(ConflictError, match="already set up"):
            await profile_service.setup_username(UserId("user-1"), "calm_cat")

    @pytest.mark.asyncio
    async def test_taken_username_conflicts(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.setup_username(UserId("user-1"), "angry_cat")

        with pytest.raises(ConflictError, match="already taken"):
            await profile_service.setup_username(UserId("user-2"), "angry_cat")

        assert await profile_service.is_username_available("angry_cat") is False
        assert await profile_service.is_username_available("calm_cat") is True


class TestProfileLookups:
    """Tests for reading and updating profiles."""

    @pytest.mark.asyncio
    async def test_get_profile_without_setup(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_profile(UserId("user-1"))

    @pytest.mark.asyncio
    async def test_malformed_username_lookup_returns_none(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        assert await profile_service.get_profile_by_username("not valid!") is None

    @pytest.mark.asyncio
    async def test_update_bio(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.setup_username(UserId("user-1"), "angry_cat")

        updated = await profile_service.update_bio(UserId("user-1"), "  hi there ")
        cleared = await profile_service.update_bio(UserId("user-1"), "   ")

        assert updated.bio == "hi there"
        assert cleared.bio is None

    @pytest.mark.asyncio
    async def test_update_bio_too_long(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.setup_username(UserId("user-1"), "angry_cat")

        with pytest.raises(ValidationError):
            await profile_service.update_bio(UserId("user-1"), "a" * 501)

    @pytest.mark.asyncio
    async def test_resolve_usernames_falls_back_to_anonymous(self, unit_env):
        """Every given ID maps to a name; missing profiles read as anonymous."""
        profile_service = await unit_env.get(ProfileService)
        await profile_service.setup_username(UserId("user-1"), "angry_cat")

        names = await profile_service.resolve_usernames(
            [UserId("user-1"), UserId("ghost"), UserId("user-1")]
        )

        assert names == {"user-1": "angry_cat", "ghost": "anonymous"}
        assert await profile_service.resolve_usernames([]) == {}
