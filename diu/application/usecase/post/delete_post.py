"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.application.usecase.comment import DeleteResponse
from diu.domain.service import PostService
from diu.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: UUID
    user_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with its comments and likes."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeleteResponse:
        """Delete a post owned by the requester.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user is not the post author
        """
        await self.post_service.delete_post(
            PostId(request.post_id), UserId(request.user_id)
        )
        return DeleteResponse()
