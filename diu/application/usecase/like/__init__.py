"""Like use cases."""

from .common import LikeStateResponse
from .post_like import (
    GetPostLikeStatusUseCase,
    PostLikeRequest,
    TogglePostLikeUseCase,
    UnlikePostUseCase,
)
from .post_likers import GetPostLikersRequest, GetPostLikersUseCase, PostLikerItem
from .toggle_comment_like import ToggleCommentLikeRequest, ToggleCommentLikeUseCase

__all__ = [
    "GetPostLikeStatusUseCase",
    "GetPostLikersRequest",
    "GetPostLikersUseCase",
    "LikeStateResponse",
    "PostLikeRequest",
    "PostLikerItem",
    "ToggleCommentLikeRequest",
    "ToggleCommentLikeUseCase",
    "TogglePostLikeUseCase",
    "UnlikePostUseCase",
]
