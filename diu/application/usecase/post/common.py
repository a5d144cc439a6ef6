"""Post response model and feed enrichment."""

from datetime import datetime

from diu.application.usecase.base import CamelModel
from diu.domain.model.post import Post
from diu.domain.service import CommentService, LikeService, ProfileService
from diu.domain.value import ANONYMOUS_USERNAME, MediaType, UserId


class PostItem(CamelModel):
    """Post as shown in feeds and on its own page."""

    id: str
    author_id: str
    author_username: str
    content: str | None
    media_key: str | None
    media_type: MediaType
    created_at: datetime
    updated_at: datetime
    like_count: int
    comment_count: int
    has_liked: bool


class PostEnricher:
    """Adds author names, counts and requester likes to posts.

    Every lookup is one batch query for the whole page.
    """

    def __init__(
        self,
        profile_service: ProfileService,
        like_service: LikeService,
        comment_service: CommentService,
    ) -> None:
        self.profile_service = profile_service
        self.like_service = like_service
        self.comment_service = comment_service

    async def enrich(
        self, posts: list[Post], viewer_id: UserId | None
    ) -> list[PostItem]:
        """Build response items for a page of posts.

        Args:
            posts: Posts in display order
            viewer_id: Authenticated requester (None for anonymous)

        Returns:
            Items in the same order
        """
        if not posts:
            return []

        post_ids = [post.id for post in posts]
        usernames = await self.profile_service.resolve_usernames(
            [post.author_id for post in posts]
        )
        like_counts = await self.like_service.count_post_likes(post_ids)
        comment_counts = await self.comment_service.count_comments_for_posts(post_ids)
        liked_ids = await self.like_service.get_liked_post_ids(viewer_id, post_ids)

        return [
            PostItem(
                id=str(post.id),
                author_id=str(post.author_id),
                author_username=usernames.get(post.author_id, ANONYMOUS_USERNAME),
                content=post.content,
                media_key=post.media_key,
                media_type=post.media_type,
                created_at=post.created_at,
                updated_at=post.updated_at,
                like_count=like_counts.get(post.id, 0),
                comment_count=comment_counts.get(post.id, 0),
                has_liked=post.id in liked_ids,
            )
            for post in posts
        ]
