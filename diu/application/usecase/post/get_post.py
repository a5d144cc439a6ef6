"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import PostService
from diu.domain.value import PostId, UserId

from .common import PostEnricher, PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: UUID
    viewer_id: str | None = None


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post with its counts."""

    def __init__(self, post_service: PostService, post_enricher: PostEnricher) -> None:
        self.post_service = post_service
        self.post_enricher = post_enricher

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Get an enriched post.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.require_post(PostId(request.post_id))
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None
        items = await self.post_enricher.enrich([post], viewer_id=viewer_id)
        return items[0]
