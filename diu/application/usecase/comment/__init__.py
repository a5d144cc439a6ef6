"""Comment use cases."""

from .common import CommentResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase, DeleteResponse
from .get_comment import GetCommentUseCase
from .get_comments import CommentNodeResponse, GetCommentsRequest, GetCommentsUseCase
from .list_user_comments import ListUserCommentsRequest, ListUserCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentNodeResponse",
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "DeleteResponse",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "ListUserCommentsRequest",
    "ListUserCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
