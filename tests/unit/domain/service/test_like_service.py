"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from diu.domain.service import LikeService
from diu.domain.value import CommentId, PostId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPostLikes:
    """Tests for likes on posts."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_state(self, unit_env):
        """Liking then unliking leaves the count where it started."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_id = PostId(uuid4())
        user_id = UserId("user-1")

        # Act
        liked = await like_service.toggle_post_like(post_id, user_id)
        unliked = await like_service.toggle_post_like(post_id, user_id)

        # Assert
        assert liked.liked is True
        assert liked.like_count == 1
        assert unliked.liked is False
        assert unliked.like_count == 0

    @pytest.mark.asyncio
    async def test_like_post_twice_keeps_one_like(self, unit_env):
        """A duplicate like is reported and not stored."""
        like_service = await unit_env.get(LikeService)
        post_id = PostId(uuid4())
        user_id = UserId("user-1")

        assert await like_service.like_post(post_id, user_id) is True
        assert await like_service.like_post(post_id, user_id) is False

        state = await like_service.get_post_like_state(post_id, user_id)
        assert state.liked is True
        assert state.like_count == 1

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_noop(self, unit_env):
        like_service = await unit_env.get(LikeService)

        state = await like_service.unlike_post(PostId(uuid4()), UserId("user-1"))

        assert state.liked is False
        assert state.like_count == 0

    @pytest.mark.asyncio
    async def test_anonymous_state(self, unit_env):
        """Anonymous readers see counts but never a like of their own."""
        like_service = await unit_env.get(LikeService)
        post_id = PostId(uuid4())
        await like_service.like_post(post_id, UserId("user-1"))
        await like_service.like_post(post_id, UserId("user-2"))

        state = await like_service.get_post_like_state(post_id, None)

        assert state.liked is False
        assert state.like_count == 2
        assert await like_service.get_liked_post_ids(None, [post_id]) == set()

    @pytest.mark.asyncio
    async def test_batch_counts(self, unit_env):
        like_service = await unit_env.get(LikeService)
        popular = PostId(uuid4())
        quiet = PostId(uuid4())
        await like_service.like_post(popular, UserId("user-1"))
        await like_service.like_post(popular, UserId("user-2"))

        counts = await like_service.count_post_likes([popular, quiet])
        liked = await like_service.get_liked_post_ids(
            UserId("user-1"), [popular, quiet]
        )

        assert counts.get(popular) == 2
        assert counts.get(quiet, 0) == 0
        assert liked == {popular}


class TestCommentLikes:
    """Tests for likes on comments."""

    @pytest.mark.asyncio
    async def test_toggle_comment_like(self, unit_env):
        like_service = await unit_env.get(LikeService)
        comment_id = CommentId(uuid4())

        first = await like_service.toggle_comment_like(comment_id, UserId("user-1"))
        other = await like_service.toggle_comment_like(comment_id, UserId("user-2"))
        undo = await like_service.toggle_comment_like(comment_id, UserId("user-1"))

        assert (first.liked, first.like_count) == (True, 1)
        assert (other.liked, other.like_count) == (True, 2)
        assert (undo.liked, undo.like_count) == (False, 1)

        counts = await like_service.count_comment_likes([comment_id])
        assert counts.get(comment_id) == 1
        assert await like_service.get_liked_comment_ids(
            UserId("user-2"), [comment_id]
        ) == {comment_id}

    @pytest.mark.asyncio
    async def test_empty_batches(self, unit_env):
        like_service = await unit_env.get(LikeService)

        assert await like_service.count_comment_likes([]) == {}
        assert await like_service.get_liked_comment_ids(UserId("user-1"), []) == set()
