"""Domain value objects for DIU."""

from diu.domain.value.identifiers import (
    CommentId,
    CommentLikeId,
    PostId,
    PostLikeId,
    ProfileId,
    StampId,
    UserId,
)
from diu.domain.value.types import (
    ANONYMOUS_USERNAME,
    LikeState,
    LikeTarget,
    MediaType,
    StampSummary,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProfileId",
    "PostId",
    "PostLikeId",
    "CommentId",
    "CommentLikeId",
    "StampId",
    # Types
    "ANONYMOUS_USERNAME",
    "LikeState",
    "LikeTarget",
    "MediaType",
    "StampSummary",
    "Username",
]
