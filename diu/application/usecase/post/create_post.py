"""Create post use case."""

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import PostService
from diu.domain.value import MediaType, UserId

from .common import PostEnricher, PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    content: str | None = None
    media_key: str | None = None
    media_type: MediaType | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a text, photo or video post."""

    def __init__(self, post_service: PostService, post_enricher: PostEnricher) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            post_enricher: Builds the response item
        """
        self.post_service = post_service
        self.post_enricher = post_enricher

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Raises:
            ValidationError: If neither content nor media is given
        """
        author_id = UserId(request.author_id)
        post = await self.post_service.create_post(
            author_id=author_id,
            content=request.content,
            media_key=request.media_key,
            media_type=request.media_type,
        )
        items = await self.post_enricher.enrich([post], viewer_id=author_id)
        return items[0]
