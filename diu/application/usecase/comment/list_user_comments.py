"""List a user's comments use case."""

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.config import APISettings
from diu.domain.error import NotFoundError
from diu.domain.service import CommentService, ProfileService

from .common import CommentResponse


class ListUserCommentsRequest(BaseModel):
    """List user comments request."""

    username: str
    limit: int | None = None
    offset: int = 0


class ListUserCommentsUseCase(BaseUseCase):
    """Use case for a user's comment history, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        api_settings: APISettings,
    ) -> None:
        """Initialize list user comments use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile service to resolve the username
            api_settings: API settings (page size defaults and cap)
        """
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.api_settings = api_settings

    async def execute(self, request: ListUserCommentsRequest) -> list[CommentResponse]:
        """Execute list user comments flow.

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
        comments = await self.comment_service.get_comments_by_author(
            profile.user_id, limit=limit, offset=max(request.offset, 0)
        )
        return [CommentResponse.from_domain(comment) for comment in comments]
