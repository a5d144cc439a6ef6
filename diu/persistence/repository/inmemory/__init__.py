"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_like import InMemoryCommentLikeRepository
from .post import InMemoryPostRepository
from .post_like import InMemoryPostLikeRepository
from .profile import InMemoryProfileRepository
from .stamp import InMemoryStampRepository
from .store import InMemoryStore

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentLikeRepository",
    "InMemoryPostRepository",
    "InMemoryPostLikeRepository",
    "InMemoryProfileRepository",
    "InMemoryStampRepository",
    "InMemoryStore",
]
