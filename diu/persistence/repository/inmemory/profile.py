"""In-memory profile repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from diu.domain.model.common import utc_now
from diu.domain.model.profile import Profile
from diu.domain.repository.profile import ProfileRepository
from diu.domain.value import UserId, Username

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        return self._store.profiles.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        for profile in self._store.profiles.values():
            if profile.username == username:
                return profile
        return None

    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> list[Profile]:
        """Find profiles for several users."""
        return [
            self._store.profiles[user_id]
            for user_id in user_ids
            if user_id in self._store.profiles
        ]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile.

        Raises:
            IntegrityError: If the user or the username already has a profile
        """
        if profile.user_id in self._store.profiles or await self.find_by_username(
            profile.username
        ):
            raise IntegrityError("Duplicate profile", None, Exception())
        self._store.profiles[profile.user_id] = profile
        return profile

    async def update_bio(self, user_id: UserId, bio: str | None) -> Optional[Profile]:
        """Update a user's bio."""
        profile = self._store.profiles.get(user_id)
        if not profile:
            return None
        updated = profile.model_copy(update={"bio": bio, "updated_at": utc_now()})
        self._store.profiles[user_id] = updated
        return updated
