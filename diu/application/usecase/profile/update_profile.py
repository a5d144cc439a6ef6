"""Update profile use case."""

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import ProfileService
from diu.domain.value import UserId

from .common import ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str
    bio: str | None = None


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing the requester's bio."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update profile flow.

        Raises:
            ValidationError: If the bio is too long
            NotFoundError: If the username hasn't been set up yet
        """
        profile = await self.profile_service.update_bio(
            UserId(request.user_id), request.bio
        )
        return ProfileResponse.from_domain(profile)
