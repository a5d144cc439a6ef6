"""Unit tests for the profile use cases."""

import pytest

from diu.application.usecase.comment import (
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
)
from diu.application.usecase.profile import (
    CheckUsernameUseCase,
    GetMyProfileUseCase,
    GetPublicProfileUseCase,
    SetupUsernameRequest,
    SetupUsernameUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from diu.domain.error import ConflictError, NotFoundError
from diu.domain.service import CommentService, PostService
from diu.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProfileUseCases:
    """Tests for username setup and profile reads."""

    @pytest.mark.asyncio
    async def test_setup_then_read(self, unit_env):
        setup = await unit_env.get(SetupUsernameUseCase)
        get_mine = await unit_env.get(GetMyProfileUseCase)
        get_public = await unit_env.get(GetPublicProfileUseCase)
        update = await unit_env.get(UpdateProfileUseCase)

        created = await setup.execute(
            SetupUsernameRequest(user_id="user-1", username="angry_cat")
        )
        await update.execute(UpdateProfileRequest(user_id="user-1", bio="hello"))
        mine = await get_mine.execute("user-1")
        public = await get_public.execute("angry_cat")

        assert created.username == "angry_cat"
        assert mine.user_id == "user-1"
        assert mine.bio == "hello"
        assert public.username == "angry_cat"
        assert public.bio == "hello"

    @pytest.mark.asyncio
    async def test_username_taken(self, unit_env):
        setup = await unit_env.get(SetupUsernameUseCase)
        check = await unit_env.get(CheckUsernameUseCase)
        await setup.execute(SetupUsernameRequest(user_id="user-1", username="cat"))

        with pytest.raises(ConflictError):
            await setup.execute(SetupUsernameRequest(user_id="user-2", username="cat"))

        assert (await check.execute("cat")).available is False
        assert (await check.execute("dog")).available is True

    @pytest.mark.asyncio
    async def test_unknown_public_profile(self, unit_env):
        get_public = await unit_env.get(GetPublicProfileUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await get_public.execute("nobody")

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_my_profile_before_setup(self, unit_env):
        get_mine = await unit_env.get(GetMyProfileUseCase)

        with pytest.raises(NotFoundError):
            await get_mine.execute("user-1")


class TestListUserCommentsUseCase:
    """Tests for a user's comment history."""

    @pytest.mark.asyncio
    async def test_lists_comments_newest_first(self, unit_env):
        setup = await unit_env.get(SetupUsernameUseCase)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(ListUserCommentsUseCase)

        await setup.execute(SetupUsernameRequest(user_id="user-1", username="cat"))
        post = await post_service.create_post(UserId("author"), "vent")
        first = await comment_service.create_comment(
            post.id, UserId("user-1"), "first"
        )
        second = await comment_service.create_comment(
            post.id, UserId("user-1"), "second"
        )
        await comment_service.create_comment(post.id, UserId("user-2"), "other")

        comments = await use_case.execute(ListUserCommentsRequest(username="cat"))

        assert [c.id for c in comments] == [str(second.id), str(first.id)]

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(ListUserCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListUserCommentsRequest(username="nobody"))
