"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase, CamelModel
from diu.domain.service import CommentService
from diu.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID
    user_id: str


class DeleteResponse(CamelModel):
    """Acknowledgement of a delete."""

    success: bool = True


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment with its replies and likes."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteResponse:
        """Delete a comment owned by the requester.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If user is not the comment author
        """
        await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return DeleteResponse()
