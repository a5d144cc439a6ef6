"""Domain value objects for DIU.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by the API and the services.
"""

import re
from datetime import date
from enum import Enum

from pydantic import field_validator

from diu.domain.value.common import RootValueObject, ValueObject

# Display name used wherever an author has not set up a profile yet
ANONYMOUS_USERNAME = "anonymous"


class MediaType(str, Enum):
    """Kind of content attached to a post."""

    TEXT = "text"
    PHOTO = "photo"
    VIDEO = "video"


class LikeTarget(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"


class Username(RootValueObject[str]):
    """Unique public username.

    3-20 characters: letters, digits and underscores.
    Examples: 'angry_cat', 'Vent2025'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_]{3,20}$", v):
            raise ValueError(
                "Username must be 3-20 characters and contain only letters, "
                "numbers, and underscores"
            )
        return v


class LikeState(ValueObject):
    """Like state of a single target as seen by one user."""

    liked: bool
    like_count: int


class StampSummary(ValueObject):
    """A user's stamp dates plus the current streak."""

    stamp_dates: list[date]
    streak: int
