"""Unit tests for in-memory cascades and uniqueness."""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from diu.domain.model import CommentLike, PostLike
from diu.domain.value import CommentLikeId, PostLikeId, UserId
from diu.persistence.repository.inmemory import (
    InMemoryCommentLikeRepository,
    InMemoryCommentRepository,
    InMemoryPostLikeRepository,
    InMemoryPostRepository,
    InMemoryStore,
)
from tests.conftest import BASE_TIME, make_comment, make_post


@pytest.fixture
def store():
    return InMemoryStore()


class TestInMemoryStore:
    """Cascades mirror the database foreign keys."""

    @pytest.mark.asyncio
    async def test_delete_post_cascades(self, store):
        posts = InMemoryPostRepository(store)
        comments = InMemoryCommentRepository(store)
        comment_likes = InMemoryCommentLikeRepository(store)
        post_likes = InMemoryPostLikeRepository(store)

        post = await posts.save(make_post())
        comment = await comments.save(make_comment(post.id, "c"))
        await comment_likes.save(
            CommentLike(
                id=CommentLikeId(uuid4()), comment_id=comment.id, user_id=UserId("u")
            )
        )
        await post_likes.save(
            PostLike(id=PostLikeId(uuid4()), post_id=post.id, user_id=UserId("u"))
        )

        assert await posts.delete(post.id) is True

        assert store.posts == {}
        assert store.comments == {}
        assert store.comment_likes == {}
        assert store.post_likes == {}

    @pytest.mark.asyncio
    async def test_duplicate_post_like_raises_integrity_error(self, store):
        post_likes = InMemoryPostLikeRepository(store)
        post = make_post()
        like = PostLike(id=PostLikeId(uuid4()), post_id=post.id, user_id=UserId("u"))
        await post_likes.save(like)

        with pytest.raises(IntegrityError):
            await post_likes.save(like.model_copy(update={"id": PostLikeId(uuid4())}))

    @pytest.mark.asyncio
    async def test_count_by_posts(self, store):
        post_likes = InMemoryPostLikeRepository(store)
        post = make_post()
        for user in ("a", "b"):
            await post_likes.save(
                PostLike(id=PostLikeId(uuid4()), post_id=post.id, user_id=UserId(user))
            )

        assert await post_likes.count_by_posts([post.id]) == {post.id: 2}

    @pytest.mark.asyncio
    async def test_find_by_author_breaks_timestamp_ties_by_insert_order(self, store):
        comments = InMemoryCommentRepository(store)
        post = make_post()
        first = await comments.save(make_comment(post.id, "first", author_id="a"))
        second = await comments.save(make_comment(post.id, "second", author_id="a"))
        assert first.created_at == second.created_at

        page = await comments.find_by_author(UserId("a"), limit=1, offset=0)
        next_page = await comments.find_by_author(UserId("a"), limit=1, offset=1)

        assert [c.content for c in page + next_page] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_find_likes_by_post_newest_first(self, store):
        post_likes = InMemoryPostLikeRepository(store)
        post = make_post()
        for minutes, user in enumerate(("a", "b", "c")):
            await post_likes.save(
                PostLike(
                    id=PostLikeId(uuid4()),
                    post_id=post.id,
                    user_id=UserId(user),
                    created_at=BASE_TIME + timedelta(minutes=minutes),
                )
            )

        likes = await post_likes.find_by_post(post.id, limit=2)
        rest = await post_likes.find_by_post(post.id, limit=2, offset=2)

        assert [like.user_id for like in likes] == ["c", "b"]
        assert [like.user_id for like in rest] == ["a"]
