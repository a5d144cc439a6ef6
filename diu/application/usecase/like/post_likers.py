"""List who liked a post."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase, CamelModel
from diu.config import APISettings
from diu.domain.service import LikeService, PostService, ProfileService
from diu.domain.value import ANONYMOUS_USERNAME, PostId


class GetPostLikersRequest(BaseModel):
    """Post likers request."""

    post_id: UUID
    limit: int | None = None
    offset: int = 0


class PostLikerItem(CamelModel):
    """A user who liked a post."""

    user_id: str
    username: str
    created_at: datetime


class GetPostLikersUseCase(BaseUseCase):
    """Use case for the public list of a post's likers, newest first."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        profile_service: ProfileService,
        api_settings: APISettings,
    ) -> None:
        """Initialize post likers use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
            profile_service: Profile domain service, for usernames
            api_settings: API settings (page size defaults and cap)
        """
        self.post_service = post_service
        self.like_service = like_service
        self.profile_service = profile_service
        self.api_settings = api_settings

    async def execute(self, request: GetPostLikersRequest) -> list[PostLikerItem]:
        """List a page of likers.

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(request.post_id)
        await self.post_service.require_post(post_id)

        limit = min(
            request.limit or self.api_settings.default_page_size,
            self.api_settings.max_page_size,
        )
        likes = await self.like_service.list_post_likes(
            post_id, limit=limit, offset=max(request.offset, 0)
        )
        usernames = await self.profile_service.resolve_usernames(
            [like.user_id for like in likes]
        )
        return [
            PostLikerItem(
                user_id=str(like.user_id),
                username=usernames.get(like.user_id, ANONYMOUS_USERNAME),
                created_at=like.created_at,
            )
            for like in likes
        ]
