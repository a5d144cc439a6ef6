"""Strongly typed identifiers for DIU domain entities.

User ids come from the external identity provider and are opaque strings.
Every entity owned by this service is keyed by a UUID.
"""

from typing import NewType
from uuid import UUID

# Issued by the identity provider, never generated here
UserId = NewType("UserId", str)

ProfileId = NewType("ProfileId", UUID)
PostId = NewType("PostId", UUID)
PostLikeId = NewType("PostLikeId", UUID)
CommentId = NewType("CommentId", UUID)
CommentLikeId = NewType("CommentLikeId", UUID)
StampId = NewType("StampId", UUID)
