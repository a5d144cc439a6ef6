"""Comment domain service."""

from uuid import uuid4

import logfire

from diu.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from diu.domain.model.comment import Comment
from diu.domain.model.common import utc_now
from diu.domain.repository import CommentRepository
from diu.domain.value import CommentId, PostId, UserId

from .base import Service

MAX_COMMENT_LENGTH = 2000


def clean_comment_content(content: str | None) -> str:
    """Trim comment content and check it is storable.

    Raises:
        ValidationError: If content is empty after trimming or too long
    """
    cleaned = (content or "").strip()
    if not cleaned:
        raise ValidationError("Comment content is required")
    if len(cleaned) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            f"Comment content must be at most {MAX_COMMENT_LENGTH} characters"
        )
    return cleaned


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The caller is responsible for checking that the post exists.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text (trimmed before storing)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or the parent is on another post
            NotFoundError: If the parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = clean_comment_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment must belong to the same post")

            now = utc_now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=text,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get every comment of a post, newest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments, replies included
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comments_by_author(
        self, author_id: UserId, limit: int, offset: int
    ) -> list[Comment]:
        """Get a user's comments, newest first."""
        with logfire.span(
            "comment_service.get_comments_by_author",
            author_id=str(author_id),
            limit=limit,
            offset=offset,
        ):
            return await self.comment_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def update_content(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Replace the text of a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: User requesting the change
            content: New text

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            text = clean_comment_content(content)
            comment = await self.get_comment(comment_id)
            if comment.author_id != user_id:
                logfire.warn(
                    "Comment update by non-author",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            updated = await self.comment_repository.update_content(comment_id, text)
            if not updated:
                # Deleted between the read and the write
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                text_length=len(updated.content),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment owned by the user, with its replies and likes.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_id != user_id:
                logfire.warn(
                    "Comment delete by non-author",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def count_comments_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, int]:
        """Count comments of several posts in one query."""
        if not post_ids:
            return {}
        return await self.comment_repository.count_by_posts(post_ids)
