"""Toggle comment like use case."""

from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import CommentService, LikeService
from diu.domain.value import CommentId, UserId

from .common import LikeStateResponse


class ToggleCommentLikeRequest(BaseModel):
    """Toggle comment like request."""

    comment_id: UUID
    user_id: str


class ToggleCommentLikeUseCase(BaseUseCase):
    """Use case for liking or un-liking a comment."""

    def __init__(
        self, comment_service: CommentService, like_service: LikeService
    ) -> None:
        """Initialize toggle comment like use case.

        Args:
            comment_service: Comment domain service
            like_service: Like domain service
        """
        self.comment_service = comment_service
        self.like_service = like_service

    async def execute(self, request: ToggleCommentLikeRequest) -> LikeStateResponse:
        """Execute toggle flow.

        Steps:
        1. Verify comment exists
        2. Toggle the requester's like and read the new count

        Raises:
            NotFoundError: If comment not found
        """
        comment_id = CommentId(request.comment_id)
        await self.comment_service.get_comment(comment_id)

        state = await self.like_service.toggle_comment_like(
            comment_id, UserId(request.user_id)
        )
        return LikeStateResponse.from_domain(state)
