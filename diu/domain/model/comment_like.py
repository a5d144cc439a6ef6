"""Comment like entity."""

from datetime import datetime

from pydantic import Field

from diu.domain.model.common import DomainModel, utc_now
from diu.domain.value import CommentId, CommentLikeId, UserId


class CommentLike(DomainModel):
    """A user's like on a comment.

    At most one like per user per comment (unique constraint in storage).
    """

    id: CommentLikeId
    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=utc_now)
