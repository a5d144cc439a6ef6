"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from diu.domain.model.post import Post
from diu.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 20, offset: int = 0) -> List[Post]:
        """Find posts for the public feed, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its comments and likes.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass
