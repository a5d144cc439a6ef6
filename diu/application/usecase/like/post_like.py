"""Post like use cases."""

from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import LikeService, PostService
from diu.domain.value import PostId, UserId

from .common import LikeStateResponse


class PostLikeRequest(BaseModel):
    """Request naming a post and the requester."""

    post_id: UUID
    user_id: str


class TogglePostLikeUseCase(BaseUseCase):
    """Use case for liking or un-liking a post."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize toggle post like use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: PostLikeRequest) -> LikeStateResponse:
        """Toggle the requester's like on a post.

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(request.post_id)
        await self.post_service.require_post(post_id)

        state = await self.like_service.toggle_post_like(
            post_id, UserId(request.user_id)
        )
        return LikeStateResponse.from_domain(state)


class UnlikePostUseCase(BaseUseCase):
    """Use case for removing a like from a post (idempotent)."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: PostLikeRequest) -> LikeStateResponse:
        """Remove the requester's like, if any.

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(request.post_id)
        await self.post_service.require_post(post_id)

        state = await self.like_service.unlike_post(post_id, UserId(request.user_id))
        return LikeStateResponse.from_domain(state)


class GetPostLikeStatusUseCase(BaseUseCase):
    """Use case for reading the requester's like state on a post."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: PostLikeRequest) -> LikeStateResponse:
        """Read like count and whether the requester likes the post.

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(request.post_id)
        await self.post_service.require_post(post_id)

        state = await self.like_service.get_post_like_state(
            post_id, UserId(request.user_id)
        )
        return LikeStateResponse.from_domain(state)
