"""Get comments use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase, CamelModel
from diu.config import APISettings
from diu.domain.service import (
    CommentNode,
    CommentService,
    LikeService,
    PostService,
    ProfileService,
    build_comment_forest,
)
from diu.domain.service.comment_tree import count_nodes
from diu.domain.value import PostId, UserId


class CommentNodeResponse(CamelModel):
    """Comment with its author name, like state and nested replies.

    Recursive structure mirroring the domain tree; ``replies`` is always a
    list, empty for leaves.
    """

    id: str
    post_id: str
    content: str
    author_id: str
    author_username: str
    created_at: datetime
    parent_comment_id: str | None
    has_liked: bool
    like_count: int
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert domain CommentNode to response model.

        Args:
            node: Domain comment tree node

        Returns:
            API response model with replies recursively converted
        """
        comment = node.comment
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            content=comment.content,
            author_id=str(comment.author_id),
            author_username=node.author_username,
            created_at=comment.created_at,
            parent_comment_id=str(comment.parent_id) if comment.parent_id else None,
            has_liked=node.has_liked,
            like_count=node.like_count,
            replies=[cls.from_domain(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: UUID
    viewer_id: str | None = None  # Authenticated requester, if any
    limit: int | None = None  # Root comments per page
    offset: int = 0


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading a post's comments as nested reply trees."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        like_service: LikeService,
        profile_service: ProfileService,
        api_settings: APISettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            like_service: Like service for counts and requester likes
            profile_service: Profile service for author display names
            api_settings: API settings (page size defaults and cap)
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.like_service = like_service
        self.profile_service = profile_service
        self.api_settings = api_settings

    async def execute(self, request: GetCommentsRequest) -> list[CommentNodeResponse]:
        """Execute get comments flow.

        Steps:
        1. Verify post exists (before reading any comment)
        2. Fetch every comment of the post, newest first
        3. Batch lookups: like counts, requester likes, author names
        4. Assemble the forest, paginating root comments only

        Args:
            request: Post ID, optional requester and root pagination

        Returns:
            Root comments newest first, each with its full reply subtree

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(request.post_id)
        limit = min(
            request.limit or self.api_settings.default_page_size,
            self.api_settings.max_page_size,
        )
        offset = max(request.offset, 0)
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        await self.post_service.require_post(post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        if not comments:
            return []

        comment_ids = [comment.id for comment in comments]
        like_counts = await self.like_service.count_comment_likes(comment_ids)
        liked_ids = await self.like_service.get_liked_comment_ids(
            viewer_id, comment_ids
        )
        usernames = await self.profile_service.resolve_usernames(
            [comment.author_id for comment in comments]
        )

        forest = build_comment_forest(
            comments,
            usernames=usernames,
            like_counts=like_counts,
            liked_ids=liked_ids,
            offset=offset,
            limit=limit,
        )
        logfire.info(
            "Comment tree assembled",
            post_id=str(post_id),
            comments=len(comments),
            roots=len(forest),
            nodes=count_nodes(forest),
        )

        return [CommentNodeResponse.from_domain(node) for node in forest]
