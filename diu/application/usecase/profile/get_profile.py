"""Profile read use cases."""

from diu.application.usecase.base import BaseUseCase, CamelModel
from diu.domain.error import NotFoundError
from diu.domain.service import ProfileService
from diu.domain.value import UserId

from .common import ProfileResponse, PublicProfileResponse


class GetMyProfileUseCase(BaseUseCase):
    """Use case for reading the requester's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, user_id: str) -> ProfileResponse:
        """Get the requester's profile.

        Raises:
            NotFoundError: If the username hasn't been set up yet
        """
        profile = await self.profile_service.get_profile(UserId(user_id))
        return ProfileResponse.from_domain(profile)


class GetPublicProfileUseCase(BaseUseCase):
    """Use case for reading someone's public profile by username."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, username: str) -> PublicProfileResponse:
        """Get a public profile.

        Raises:
            NotFoundError: If no user has this username
        """
        profile = await self.profile_service.get_profile_by_username(username)
        if not profile:
            raise NotFoundError("User", username)
        return PublicProfileResponse.from_domain(profile)


class UsernameAvailabilityResponse(CamelModel):
    """Whether a username can still be claimed."""

    username: str
    available: bool


class CheckUsernameUseCase(BaseUseCase):
    """Use case for the username availability check (no auth)."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, username: str) -> UsernameAvailabilityResponse:
        """Check a username.

        Raises:
            ValidationError: If the username format is invalid
        """
        available = await self.profile_service.is_username_available(username)
        return UsernameAvailabilityResponse(
            username=username.strip(), available=available
        )
