"""PostgreSQL repository implementations."""

from diu.persistence.repository.comment import PostgresCommentRepository
from diu.persistence.repository.comment_like import PostgresCommentLikeRepository
from diu.persistence.repository.post import PostgresPostRepository
from diu.persistence.repository.post_like import PostgresPostLikeRepository
from diu.persistence.repository.profile import PostgresProfileRepository
from diu.persistence.repository.stamp import PostgresStampRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCommentLikeRepository",
    "PostgresPostRepository",
    "PostgresPostLikeRepository",
    "PostgresProfileRepository",
    "PostgresStampRepository",
]
