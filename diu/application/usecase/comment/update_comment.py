"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import CommentService
from diu.domain.value import CommentId, UserId

from .common import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: UUID
    user_id: str  # User requesting the update
    content: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing the text of a comment.

    Only the comment author can edit.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If comment not found
            NotAuthorizedError: If user is not the comment author
        """
        updated = await self.comment_service.update_content(
            comment_id=CommentId(request.comment_id),
            user_id=UserId(request.user_id),
            content=request.content,
        )
        return CommentResponse.from_domain(updated)
