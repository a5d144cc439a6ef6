"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_forest
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService
from .profile_service import ProfileService
from .stamp_service import StampService, compute_streak

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "LikeService",
    "PostService",
    "ProfileService",
    "Service",
    "StampService",
    "build_comment_forest",
    "compute_streak",
]
