"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from diu.domain.model.comment import Comment
from diu.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every comment of a post, newest first.

        Replies are included at any depth; there is no row pagination.

        Args:
            post_id: The post ID

        Returns:
            All comments of the post ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment together with its replies and likes.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count comments for several posts in one query.

        Args:
            post_ids: Post IDs to count for

        Returns:
            Mapping of post ID to comment count (0 for posts without comments)
        """
        pass
