"""Post like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from diu.domain.model.post_like import PostLike
from diu.domain.value import PostId, UserId


class PostLikeRepository(ABC):
    """Repository for PostLike entity."""

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[PostLike]:
        """Find a user's like on a post."""
        pass

    @abstractmethod
    async def save(self, like: PostLike) -> PostLike:
        """Insert a like.

        Raises:
            IntegrityError: If the user already likes this post
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like on a post.

        Returns:
            True if a like was removed, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_post(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> list[PostLike]:
        """Find the likes on a post, newest first."""
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes for several posts in one query."""
        pass

    @abstractmethod
    async def find_liked_post_ids(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Find which of the given posts a user likes (batch query)."""
        pass
