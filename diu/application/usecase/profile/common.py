"""Profile response models."""

from datetime import datetime

from diu.application.usecase.base import CamelModel
from diu.domain.model.profile import Profile


class ProfileResponse(CamelModel):
    """The requester's own profile."""

    id: str
    user_id: str
    username: str
    bio: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=str(profile.id),
            user_id=str(profile.user_id),
            username=profile.username.root,
            bio=profile.bio,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class PublicProfileResponse(CamelModel):
    """What anyone can see of a profile."""

    username: str
    bio: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "PublicProfileResponse":
        return cls(
            username=profile.username.root,
            bio=profile.bio,
            created_at=profile.created_at,
        )
