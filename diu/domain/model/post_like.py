"""Post like entity."""

from datetime import datetime

from pydantic import Field

from diu.domain.model.common import DomainModel, utc_now
from diu.domain.value import PostId, PostLikeId, UserId


class PostLike(DomainModel):
    """A user's like on a post.

    At most one like per user per post (unique constraint in storage).
    """

    id: PostLikeId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=utc_now)
