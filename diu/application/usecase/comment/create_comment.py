"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import CommentService, PostService
from diu.domain.service.comment_service import clean_comment_content
from diu.domain.value import CommentId, PostId, UserId

from .common import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: UUID
    author_id: str  # User ID from authenticated user
    content: str
    parent_comment_id: UUID | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Steps, each failing before anything is written:
        1. Check content is non-empty after trimming
        2. Verify post exists via post service
        3. Create comment via comment service (validates parent if replying)

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            ValidationError: If content is empty or parent is on another post
            NotFoundError: If post or parent comment not found
        """
        content = clean_comment_content(request.content)

        post_id = PostId(request.post_id)
        await self.post_service.require_post(post_id)

        parent_id = (
            CommentId(request.parent_comment_id) if request.parent_comment_id else None
        )
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(request.author_id),
            content=content,
            parent_id=parent_id,
        )

        return CommentResponse.from_domain(comment)
