"""Get single comment use case."""

from uuid import UUID

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import CommentService
from diu.domain.value import CommentId

from .common import CommentResponse


class GetCommentUseCase(BaseUseCase):
    """Use case for reading one stored comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, comment_id: UUID) -> CommentResponse:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_service.get_comment(CommentId(comment_id))
        return CommentResponse.from_domain(comment)
