"""Unit tests for the like use cases."""

from uuid import uuid4

import pytest

from diu.application.usecase.like import (
    GetPostLikersRequest,
    GetPostLikersUseCase,
    GetPostLikeStatusUseCase,
    PostLikeRequest,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
    TogglePostLikeUseCase,
    UnlikePostUseCase,
)
from diu.domain.error import NotFoundError
from diu.domain.service import CommentService, LikeService, PostService, ProfileService
from diu.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPostLikeUseCases:
    """Tests for liking posts."""

    @pytest.mark.asyncio
    async def test_toggle_unlike_and_status(self, unit_env):
        post_service = await unit_env.get(PostService)
        toggle = await unit_env.get(TogglePostLikeUseCase)
        unlike = await unit_env.get(UnlikePostUseCase)
        status = await unit_env.get(GetPostLikeStatusUseCase)
        post = await post_service.create_post(UserId("author"), "vent")
        request = PostLikeRequest(post_id=post.id, user_id="user-1")

        liked = await toggle.execute(request)
        seen = await status.execute(request)
        removed = await unlike.execute(request)
        removed_again = await unlike.execute(request)

        assert (liked.liked, liked.like_count) == (True, 1)
        assert (seen.liked, seen.like_count) == (True, 1)
        assert (removed.liked, removed.like_count) == (False, 0)
        assert (removed_again.liked, removed_again.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_like_missing_post(self, unit_env):
        toggle = await unit_env.get(TogglePostLikeUseCase)

        with pytest.raises(NotFoundError):
            await toggle.execute(PostLikeRequest(post_id=uuid4(), user_id="user-1"))


class TestGetPostLikersUseCase:
    """Tests for the public likers list."""

    @pytest.mark.asyncio
    async def test_lists_likers_newest_first_with_usernames(self, unit_env):
        post_service = await unit_env.get(PostService)
        like_service = await unit_env.get(LikeService)
        profile_service = await unit_env.get(ProfileService)
        use_case = await unit_env.get(GetPostLikersUseCase)
        post = await post_service.create_post(UserId("author"), "vent")
        await profile_service.setup_username(UserId("user-1"), "calm_owl")
        await like_service.like_post(post.id, UserId("user-1"))
        await like_service.like_post(post.id, UserId("user-2"))

        likers = await use_case.execute(GetPostLikersRequest(post_id=post.id))
        first_page = await use_case.execute(
            GetPostLikersRequest(post_id=post.id, limit=1)
        )

        assert [(liker.user_id, liker.username) for liker in likers] == [
            ("user-2", "anonymous"),
            ("user-1", "calm_owl"),
        ]
        assert [liker.user_id for liker in first_page] == ["user-2"]

    @pytest.mark.asyncio
    async def test_likers_of_missing_post(self, unit_env):
        use_case = await unit_env.get(GetPostLikersUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(GetPostLikersRequest(post_id=uuid4()))

        assert exc_info.value.resource == "Post"


class TestToggleCommentLikeUseCase:
    """Tests for liking comments."""

    @pytest.mark.asyncio
    async def test_toggle_comment_like(self, unit_env):
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(ToggleCommentLikeUseCase)
        post = await post_service.create_post(UserId("author"), "vent")
        comment = await comment_service.create_comment(
            post.id, UserId("user-1"), "hugs"
        )
        request = ToggleCommentLikeRequest(comment_id=comment.id, user_id="user-2")

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert (first.liked, first.like_count) == (True, 1)
        assert (second.liked, second.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_like_missing_comment(self, unit_env):
        use_case = await unit_env.get(ToggleCommentLikeUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                ToggleCommentLikeRequest(comment_id=uuid4(), user_id="user-1")
            )

        assert exc_info.value.resource == "Comment"
