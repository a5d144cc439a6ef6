"""Set up username use case."""

from pydantic import BaseModel

from diu.application.usecase.base import BaseUseCase
from diu.domain.service import ProfileService
from diu.domain.value import UserId

from .common import ProfileResponse


class SetupUsernameRequest(BaseModel):
    """Set up username request."""

    user_id: str  # User ID from authenticated user
    username: str


class SetupUsernameUseCase(BaseUseCase):
    """Use case for picking a username after first login.

    Creates the profile; until then the user appears as "anonymous".
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize set up username use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: SetupUsernameRequest) -> ProfileResponse:
        """Execute set up username flow.

        Raises:
            ValidationError: If the username format is invalid
            ConflictError: If the username is taken or already set up
        """
        profile = await self.profile_service.setup_username(
            UserId(request.user_id), request.username
        )
        return ProfileResponse.from_domain(profile)
