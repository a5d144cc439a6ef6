"""Repository interfaces."""

from .comment import CommentRepository
from .comment_like import CommentLikeRepository
from .post import PostRepository
from .post_like import PostLikeRepository
from .profile import ProfileRepository
from .stamp import StampRepository

__all__ = [
    "CommentRepository",
    "CommentLikeRepository",
    "PostRepository",
    "PostLikeRepository",
    "ProfileRepository",
    "StampRepository",
]
