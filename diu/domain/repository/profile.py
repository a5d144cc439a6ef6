"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from diu.domain.model.profile import Profile
from diu.domain.value import UserId, Username


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user.

        Args:
            user_id: The user's ID

        Returns:
            The profile if the user has set one up, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username.

        Args:
            username: The username

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find profiles for several users in one query.

        Users without a profile are simply absent from the result.

        Args:
            user_ids: User IDs to look up

        Returns:
            Profiles found
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Insert a new profile.

        Raises:
            IntegrityError: If the username or user already has a profile
        """
        pass

    @abstractmethod
    async def update_bio(self, user_id: UserId, bio: str | None) -> Optional[Profile]:
        """Update a user's bio.

        Args:
            user_id: The user's ID
            bio: New bio (None to clear)

        Returns:
            Updated profile, or None if the user has no profile
        """
        pass
