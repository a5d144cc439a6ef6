"""Profile and username routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status

from diu.application.usecase.base import CamelModel
from diu.application.usecase.profile import (
    CheckUsernameUseCase,
    GetMyProfileUseCase,
    GetPublicProfileUseCase,
    ProfileResponse,
    PublicProfileResponse,
    SetupUsernameRequest,
    SetupUsernameUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UsernameAvailabilityResponse,
)
from diu.domain.error import DomainError
from diu.domain.service import JWTService
from diu.interface.api.dependencies import get_auth_token, require_user_id
from diu.interface.error import to_http_exception

router = APIRouter(tags=["profiles"], route_class=DishkaRoute)


class SetupUsernameAPIRequest(CamelModel):
    """API request for choosing a username."""

    username: str


class UpdateProfileAPIRequest(CamelModel):
    """API request for updating the profile."""

    bio: str | None = None


@router.post(
    "/users/setup-username",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def setup_username(
    request: SetupUsernameAPIRequest,
    setup_username_use_case: FromDishka[SetupUsernameUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ProfileResponse:
    """Pick a unique username after first login.

    Raises:
        HTTPException: 400 malformed username, 409 taken or already set up
    """
    user_id = require_user_id(jwt_service, auth_token, "set up a username")

    try:
        return await setup_username_use_case.execute(
            SetupUsernameRequest(user_id=user_id, username=request.username)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/users/profile", response_model=ProfileResponse)
@router.get("/profiles/me", response_model=ProfileResponse)
async def get_my_profile(
    get_my_profile_use_case: FromDishka[GetMyProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ProfileResponse:
    """Get the requester's profile; 404 until a username is set up."""
    user_id = require_user_id(jwt_service, auth_token, "read your profile")

    try:
        return await get_my_profile_use_case.execute(user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/users/profile", response_model=ProfileResponse)
@router.put("/profiles/me", response_model=ProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ProfileResponse:
    """Update the requester's bio."""
    user_id = require_user_id(jwt_service, auth_token, "update your profile")

    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(user_id=user_id, bio=request.bio)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get(
    "/users/check-username/{username}", response_model=UsernameAvailabilityResponse
)
async def check_username(
    username: str,
    check_username_use_case: FromDishka[CheckUsernameUseCase],
) -> UsernameAvailabilityResponse:
    """Check whether a username is still available (no auth required)."""
    try:
        return await check_username_use_case.execute(username)
    except DomainError as e:
        raise to_http_exception(e)


# Must stay below /profiles/me
@router.get("/profiles/{username}", response_model=PublicProfileResponse)
async def get_public_profile(
    username: str,
    get_public_profile_use_case: FromDishka[GetPublicProfileUseCase],
) -> PublicProfileResponse:
    """Get someone's public profile."""
    try:
        return await get_public_profile_use_case.execute(username)
    except DomainError as e:
        raise to_http_exception(e)
