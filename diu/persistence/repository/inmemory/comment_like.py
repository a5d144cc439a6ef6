"""In-memory comment like repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from diu.domain.model.comment_like import CommentLike
from diu.domain.repository.comment_like import CommentLikeRepository
from diu.domain.value import CommentId, UserId

from .store import InMemoryStore


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        return self._store.comment_likes.get((comment_id, user_id))

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes this comment
        """
        key = (like.comment_id, like.user_id)
        if key in self._store.comment_likes:
            raise IntegrityError("Duplicate comment like", None, Exception())
        self._store.comment_likes[key] = like
        return like

    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Remove a user's like on a comment."""
        return self._store.comment_likes.pop((comment_id, user_id), None) is not None

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        return sum(
            1 for like in self._store.comment_likes.values()
            if like.comment_id == comment_id
        )

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes per comment."""
        counts = {comment_id: 0 for comment_id in comment_ids}
        for like in self._store.comment_likes.values():
            if like.comment_id in counts:
                counts[like.comment_id] += 1
        return counts

    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user likes."""
        return {
            comment_id
            for comment_id in comment_ids
            if (comment_id, user_id) in self._store.comment_likes
        }
