"""Post domain service."""

from uuid import uuid4

import logfire

from diu.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from diu.domain.model.common import utc_now
from diu.domain.model.post import Post
from diu.domain.repository import PostRepository
from diu.domain.value import MediaType, PostId, UserId

from .base import Service

MAX_POST_LENGTH = 5000


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        author_id: UserId,
        content: str | None,
        media_key: str | None = None,
        media_type: MediaType | None = None,
    ) -> Post:
        """Create a post.

        Args:
            author_id: Author user ID
            content: Text content (trimmed; blank counts as absent)
            media_key: Object storage key of an uploaded file
            media_type: Kind of media; defaults to photo when a key is given

        Returns:
            Created post

        Raises:
            ValidationError: If neither text nor media is given
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            has_media=media_key is not None,
        ):
            text = (content or "").strip() or None
            key = (media_key or "").strip() or None
            if not text and not key:
                raise ValidationError("Post must contain either text content or a file")
            if text and len(text) > MAX_POST_LENGTH:
                raise ValidationError(
                    f"Post content must be at most {MAX_POST_LENGTH} characters"
                )

            if key is None:
                kind = MediaType.TEXT
            elif media_type is None or media_type == MediaType.TEXT:
                kind = MediaType.PHOTO
            else:
                kind = media_type

            now = utc_now()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                content=text,
                media_key=key,
                media_type=kind,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created", post_id=str(saved.id), media_type=saved.media_type.value
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_recent(self, limit: int, offset: int) -> list[Post]:
        """List the public feed, newest first."""
        with logfire.span("post_service.list_recent", limit=limit, offset=offset):
            posts = await self.post_repository.find_recent(limit=limit, offset=offset)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_by_author(
        self, author_id: UserId, limit: int, offset: int
    ) -> list[Post]:
        """List a user's own posts, newest first."""
        with logfire.span(
            "post_service.list_by_author",
            author_id=str(author_id),
            limit=limit,
            offset=offset,
        ):
            return await self.post_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post owned by the user, with its comments and likes.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.require_post(post_id)
            if post.author_id != user_id:
                logfire.warn(
                    "Post delete by non-author",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
