"""Comment like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from diu.domain.model.comment_like import CommentLike
from diu.domain.value import CommentId, UserId


class CommentLikeRepository(ABC):
    """Repository for CommentLike entity."""

    @abstractmethod
    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment.

        Args:
            comment_id: The comment ID
            user_id: The user's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Insert a like.

        Raises:
            IntegrityError: If the user already likes this comment
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Remove a user's like on a comment.

        Returns:
            True if a like was removed, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes for several comments in one query.

        Args:
            comment_ids: Comment IDs to count for

        Returns:
            Mapping of comment ID to like count (0 for comments without likes)
        """
        pass

    @abstractmethod
    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user likes (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comment IDs to check

        Returns:
            Subset of comment_ids liked by the user
        """
        pass
