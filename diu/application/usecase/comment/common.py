"""Comment response models shared by the comment use cases."""

from datetime import datetime

from diu.application.usecase.base import CamelModel
from diu.domain.model.comment import Comment


class CommentResponse(CamelModel):
    """Stored fields of a single comment."""

    id: str
    post_id: str
    author_id: str
    content: str
    parent_comment_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        """Convert a domain comment to the response model."""
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_comment_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
