"""Comment entity.

Comments hang off a post and may reply to another comment of the same post,
forming a tree with unlimited depth. The parent link is fixed at creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from diu.domain.model.common import DomainModel, utc_now
from diu.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.
    Deleting a comment removes its replies and likes (cascade in storage).
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment replies to another comment."""
        return self.parent_id is not None
