"""Post use cases."""

from .common import PostEnricher, PostItem
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import (
    ListMyPostsRequest,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListMyPostsRequest",
    "ListMyPostsUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "ListUserPostsRequest",
    "ListUserPostsUseCase",
    "PostEnricher",
    "PostItem",
]
