"""Profile entity.

Profiles are created after authentication when the user picks a username.
Authors without a profile are shown as "anonymous".
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from diu.domain.model.common import DomainModel, utc_now
from diu.domain.value import ProfileId, UserId, Username


class Profile(DomainModel):
    """Public profile of an authenticated user."""

    id: ProfileId
    user_id: UserId
    username: Username
    bio: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
