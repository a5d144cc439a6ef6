"""In-memory post like repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from diu.domain.model.post_like import PostLike
from diu.domain.repository.post_like import PostLikeRepository
from diu.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryPostLikeRepository(PostLikeRepository):
    """In-memory implementation of PostLikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[PostLike]:
        """Find a user's like on a post."""
        return self._store.post_likes.get((post_id, user_id))

    async def save(self, like: PostLike) -> PostLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes this post
        """
        key = (like.post_id, like.user_id)
        if key in self._store.post_likes:
            raise IntegrityError("Duplicate post like", None, Exception())
        self._store.post_likes[key] = like
        return like

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like on a post."""
        return self._store.post_likes.pop((post_id, user_id), None) is not None

    async def find_by_post(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> list[PostLike]:
        """Find the likes on a post, newest first."""
        likes = [
            like for like in self._store.post_likes.values() if like.post_id == post_id
        ]
        likes = sorted(reversed(likes), key=lambda like: like.created_at, reverse=True)
        return likes[offset : offset + limit]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for like in self._store.post_likes.values() if like.post_id == post_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes per post."""
        counts = {post_id: 0 for post_id in post_ids}
        for like in self._store.post_likes.values():
            if like.post_id in counts:
                counts[like.post_id] += 1
        return counts

    async def find_liked_post_ids(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Find which of the given posts a user likes."""
        return {
            post_id
            for post_id in post_ids
            if (post_id, user_id) in self._store.post_likes
        }
