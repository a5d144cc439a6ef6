"""Profile use cases."""

from .common import ProfileResponse, PublicProfileResponse
from .get_profile import (
    CheckUsernameUseCase,
    GetMyProfileUseCase,
    GetPublicProfileUseCase,
    UsernameAvailabilityResponse,
)
from .setup_username import SetupUsernameRequest, SetupUsernameUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "CheckUsernameUseCase",
    "GetMyProfileUseCase",
    "GetPublicProfileUseCase",
    "ProfileResponse",
    "PublicProfileResponse",
    "SetupUsernameRequest",
    "SetupUsernameUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UsernameAvailabilityResponse",
]
