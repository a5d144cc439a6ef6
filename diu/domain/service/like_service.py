"""Like domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from diu.domain.model.comment_like import CommentLike
from diu.domain.model.common import utc_now
from diu.domain.model.post_like import PostLike
from diu.domain.repository import CommentLikeRepository, PostLikeRepository
from diu.domain.value import (
    CommentId,
    CommentLikeId,
    LikeState,
    PostId,
    PostLikeId,
    UserId,
)

from .base import Service


class LikeService(Service):
    """Domain service for likes on posts and comments.

    Callers check that the target exists; this service only manages the
    like rows and their counts.
    """

    def __init__(
        self,
        post_like_repository: PostLikeRepository,
        comment_like_repository: CommentLikeRepository,
    ) -> None:
        """Initialize like service.

        Args:
            post_like_repository: Post like repository
            comment_like_repository: Comment like repository
        """
        self.post_like_repository = post_like_repository
        self.comment_like_repository = comment_like_repository

    # Posts

    async def like_post(self, post_id: PostId, user_id: UserId) -> bool:
        """Add the user's like to a post.

        Returns:
            True if a like was created, False if the user already liked it
        """
        like = PostLike(
            id=PostLikeId(uuid4()),
            post_id=post_id,
            user_id=user_id,
            created_at=utc_now(),
        )
        try:
            await self.post_like_repository.save(like)
        except IntegrityError:
            logfire.warn(
                "Duplicate post like", post_id=str(post_id), user_id=str(user_id)
            )
            return False
        return True

    async def toggle_post_like(self, post_id: PostId, user_id: UserId) -> LikeState:
        """Like the post if the user hasn't yet, otherwise remove the like.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Like state after the toggle
        """
        with logfire.span(
            "like_service.toggle_post_like", post_id=str(post_id), user_id=str(user_id)
        ):
            existing = await self.post_like_repository.find_by_post_and_user(
                post_id, user_id
            )
            if existing:
                await self.post_like_repository.delete_by_post_and_user(
                    post_id, user_id
                )
                liked = False
            else:
                # A concurrent duplicate still leaves the post liked
                await self.like_post(post_id, user_id)
                liked = True

            count = await self.post_like_repository.count_by_post(post_id)
            logfire.info(
                "Post like toggled", post_id=str(post_id), liked=liked, like_count=count
            )
            return LikeState(liked=liked, like_count=count)

    async def unlike_post(self, post_id: PostId, user_id: UserId) -> LikeState:
        """Remove the user's like from a post; no-op if there is none."""
        with logfire.span(
            "like_service.unlike_post", post_id=str(post_id), user_id=str(user_id)
        ):
            removed = await self.post_like_repository.delete_by_post_and_user(
                post_id, user_id
            )
            count = await self.post_like_repository.count_by_post(post_id)
            logfire.info(
                "Post unliked", post_id=str(post_id), removed=removed, like_count=count
            )
            return LikeState(liked=False, like_count=count)

    async def get_post_like_state(
        self, post_id: PostId, user_id: UserId | None
    ) -> LikeState:
        """Like count of a post and whether the user likes it."""
        count = await self.post_like_repository.count_by_post(post_id)
        liked = False
        if user_id is not None:
            liked = (
                await self.post_like_repository.find_by_post_and_user(post_id, user_id)
                is not None
            )
        return LikeState(liked=liked, like_count=count)

    async def list_post_likes(
        self, post_id: PostId, limit: int, offset: int = 0
    ) -> list[PostLike]:
        """Likes on a post, newest first."""
        with logfire.span(
            "like_service.list_post_likes", post_id=str(post_id), limit=limit
        ):
            return await self.post_like_repository.find_by_post(
                post_id, limit=limit, offset=offset
            )

    async def count_post_likes(self, post_ids: list[PostId]) -> dict[PostId, int]:
        """Like counts of several posts (batch query)."""
        if not post_ids:
            return {}
        return await self.post_like_repository.count_by_posts(post_ids)

    async def get_liked_post_ids(
        self, user_id: UserId | None, post_ids: list[PostId]
    ) -> set[PostId]:
        """Posts among post_ids the user likes; empty for anonymous readers."""
        if user_id is None or not post_ids:
            return set()
        return await self.post_like_repository.find_liked_post_ids(user_id, post_ids)

    # Comments

    async def toggle_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> LikeState:
        """Like the comment if the user hasn't yet, otherwise remove the like.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            Like state after the toggle
        """
        with logfire.span(
            "like_service.toggle_comment_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            existing = await self.comment_like_repository.find_by_comment_and_user(
                comment_id, user_id
            )
            if existing:
                await self.comment_like_repository.delete_by_comment_and_user(
                    comment_id, user_id
                )
                liked = False
            else:
                like = CommentLike(
                    id=CommentLikeId(uuid4()),
                    comment_id=comment_id,
                    user_id=user_id,
                    created_at=utc_now(),
                )
                try:
                    await self.comment_like_repository.save(like)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate comment like",
                        comment_id=str(comment_id),
                        user_id=str(user_id),
                    )
                liked = True

            count = await self.comment_like_repository.count_by_comment(comment_id)
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                liked=liked,
                like_count=count,
            )
            return LikeState(liked=liked, like_count=count)

    async def count_comment_likes(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, int]:
        """Like counts of several comments (batch query)."""
        if not comment_ids:
            return {}
        with logfire.span("like_service.count_comment_likes", count=len(comment_ids)):
            return await self.comment_like_repository.count_by_comments(comment_ids)

    async def get_liked_comment_ids(
        self, user_id: UserId | None, comment_ids: list[CommentId]
    ) -> set[CommentId]:
        """Comments among comment_ids the user likes; empty for anonymous readers."""
        if user_id is None or not comment_ids:
            return set()
        return await self.comment_like_repository.find_liked_comment_ids(
            user_id, comment_ids
        )
