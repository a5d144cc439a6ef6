"""List posts use cases."""

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.config import APISettings
from diu.domain.error import NotFoundError
from diu.domain.service import PostService, ProfileService
from diu.domain.value import UserId

from .common import PostEnricher, PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    viewer_id: str | None = None  # Authenticated requester, if any
    limit: int | None = None
    offset: int = 0


class ListPostsUseCase(BaseUseCase):
    """Use case for the public feed, newest first."""

    def __init__(
        self,
        post_service: PostService,
        post_enricher: PostEnricher,
        api_settings: APISettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            post_enricher: Adds names, counts and requester likes
            api_settings: API settings (page size defaults and cap)
        """
        self.post_service = post_service
        self.post_enricher = post_enricher
        self.api_settings = api_settings

    async def execute(self, request: ListPostsRequest) -> list[PostItem]:
        """Execute list posts flow."""
        limit = min(
            request.limit or self.api_settings.default_page_size,
            self.api_settings.max_page_size,
        )
        posts = await self.post_service.list_recent(
            limit=limit, offset=max(request.offset, 0)
        )
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None
        return await self.post_enricher.enrich(posts, viewer_id=viewer_id)


class ListMyPostsRequest(BaseModel):
    """List own posts request."""

    user_id: str
    limit: int | None = None
    offset: int = 0


class ListMyPostsUseCase(BaseUseCase):
    """Use case for the requester's own posts, newest first."""

    def __init__(
        self,
        post_service: PostService,
        post_enricher: PostEnricher,
        api_settings: APISettings,
    ) -> None:
        self.post_service = post_service
        self.post_enricher = post_enricher
        self.api_settings = api_settings

    async def execute(self, request: ListMyPostsRequest) -> list[PostItem]:
        """Execute list own posts flow."""
        user_id = UserId(request.user_id)
        limit = min(
            request.limit or self.api_settings.default_page_size,
            self.api_settings.max_page_size,
        )
        posts = await self.post_service.list_by_author(
            user_id, limit=limit, offset=max(request.offset, 0)
        )
        return await self.post_enricher.enrich(posts, viewer_id=user_id)


class ListUserPostsRequest(BaseModel):
    """List someone's posts by username."""

    username: str
    viewer_id: str | None = None
    limit: int | None = None
    offset: int = 0


class ListUserPostsUseCase(BaseUseCase):
    """Use case for a user's public post list, newest first."""

    def __init__(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        post_enricher: PostEnricher,
        api_settings: APISettings,
    ) -> None:
        self.post_service = post_service
        self.profile_service = profile_service
        self.post_enricher = post_enricher
        self.api_settings = api_settings

    async def execute(self, request: ListUserPostsRequest) -> list[PostItem]:
        """Execute list user posts flow.

        Raises:
            NotFoundError: If no user has this username
        """
        profile = await self.profile_service.get_profile_by_username(request.username)
        if not profile:
            raise NotFoundError("User", request.username)

        limit = min(
            request.limit or self.api_settings.default_page_size,
            self.api_settings.max_page_size,
        )
        posts = await self.post_service.list_by_author(
            profile.user_id, limit=limit, offset=max(request.offset, 0)
        )
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None
        return await self.post_enricher.enrich(posts, viewer_id=viewer_id)
