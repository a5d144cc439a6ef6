"""Profile domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from diu.domain.error import ConflictError, NotFoundError, ValidationError
from diu.domain.model.common import utc_now
from diu.domain.model.profile import Profile
from diu.domain.repository import ProfileRepository
from diu.domain.value import ANONYMOUS_USERNAME, ProfileId, UserId, Username

from .base import Service

MAX_BIO_LENGTH = 500


def parse_username(raw: str | None) -> Username:
    """Trim and validate a username.

    Raises:
        ValidationError: If the username format is invalid
    """
    candidate = (raw or "").strip()
    if not candidate:
        raise ValidationError("Username is required")
    try:
        return Username(candidate)
    except PydanticValidationError:
        raise ValidationError(
            "Username must be 3-20 characters and contain only letters, "
            "numbers, and underscores"
        )


class ProfileService(Service):
    """Domain service for user profiles and display names."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def setup_username(self, user_id: UserId, username: str) -> Profile:
        """Create the user's profile with a unique username.

        Args:
            user_id: Authenticated user ID
            username: Requested username

        Returns:
            Created profile

        Raises:
            ValidationError: If the username format is invalid
            ConflictError: If the username is taken or the user has a profile
        """
        with logfire.span("profile_service.setup_username", user_id=str(user_id)):
            name = parse_username(username)

            if await self.profile_repository.find_by_user_id(user_id):
                logfire.warn("Username already set up", user_id=str(user_id))
                raise ConflictError("Username already set up")

            if await self.profile_repository.find_by_username(name):
                logfire.warn("Username already exists", username=name.root)
                raise ConflictError("Username already taken")

            now = utc_now()
            profile = Profile(
                id=ProfileId(uuid4()),
                user_id=user_id,
                username=name,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.profile_repository.save(profile)
            except IntegrityError:
                logfire.warn("Username taken concurrently", username=name.root)
                raise ConflictError("Username already taken")

            logfire.info(
                "User profile created", user_id=str(user_id), username=name.root
            )
            return saved

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get the profile of a user.

        Raises:
            NotFoundError: If the user hasn't set up a username yet
        """
        with logfire.span("profile_service.get_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user_id(user_id)
            if not profile:
                logfire.warn(
                    "User profile not found - username not set up yet",
                    user_id=str(user_id),
                )
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def get_profile_by_username(self, username: str) -> Profile | None:
        """Get a profile by username.

        Args:
            username: Username (malformed names simply don't match)

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span(
            "profile_service.get_profile_by_username", username=username
        ):
            try:
                name = parse_username(username)
            except ValidationError:
                return None
            profile = await self.profile_repository.find_by_username(name)
            if not profile:
                logfire.warn("Profile not found", username=username)
            return profile

    async def is_username_available(self, username: str) -> bool:
        """Check whether a username is free.

        Raises:
            ValidationError: If the username format is invalid
        """
        name = parse_username(username)
        available = await self.profile_repository.find_by_username(name) is None
        logfire.info(
            "Username availability checked", username=name.root, available=available
        )
        return available

    async def update_bio(self, user_id: UserId, bio: str | None) -> Profile:
        """Update the user's bio; blank clears it.

        Raises:
            ValidationError: If the bio is too long
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.update_bio", user_id=str(user_id)):
            text = (bio or "").strip() or None
            if text and len(text) > MAX_BIO_LENGTH:
                raise ValidationError(
                    f"Bio must be at most {MAX_BIO_LENGTH} characters"
                )
            updated = await self.profile_repository.update_bio(user_id, text)
            if not updated:
                raise NotFoundError("Profile", str(user_id))
            logfire.info("Profile updated", user_id=str(user_id))
            return updated

    async def resolve_usernames(self, user_ids: list[UserId]) -> dict[UserId, str]:
        """Map author IDs to display names.

        Each distinct ID is looked up once, in a single query. Users without
        a profile map to "anonymous".

        Args:
            user_ids: Author IDs, duplicates allowed

        Returns:
            Mapping covering every given ID
        """
        distinct = list(dict.fromkeys(user_ids))
        if not distinct:
            return {}

        with logfire.span("profile_service.resolve_usernames", count=len(distinct)):
            profiles = await self.profile_repository.find_by_user_ids(distinct)
            names = {profile.user_id: profile.username.root for profile in profiles}
            return {
                user_id: names.get(user_id, ANONYMOUS_USERNAME) for user_id in distinct
            }
