"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status

from diu.application.usecase.base import CamelModel
from diu.application.usecase.comment import (
    CommentNodeResponse,
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeleteResponse,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from diu.domain.error import DomainError
from diu.domain.service import JWTService
from diu.interface.api.dependencies import get_auth_token, require_user_id
from diu.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    content: str
    parent_comment_id: UUID | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(CamelModel):
    """API request for updating a comment."""

    content: str


@router.get("/posts/{post_id}/comments", response_model=list[CommentNodeResponse])
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Depends(get_auth_token),
) -> list[CommentNodeResponse]:
    """Get a post's comments as nested reply trees.

    Root comments come newest first and are paginated; every root carries
    its complete reply subtree. If authenticated, ``hasLiked`` reflects the
    requester's likes.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for optional authentication
        limit: Root comments per page (default 20, capped at 100)
        offset: Root comments to skip
        auth_token: Bearer token (optional)

    Returns:
        Root comment nodes with replies
    """
    try:
        request = GetCommentsRequest(
            post_id=post_id,
            viewer_id=jwt_service.get_user_id_from_token(auth_token),
            limit=limit,
            offset=offset,
        )
        return await get_comments_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content and optional parent comment
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Bearer token

    Returns:
        The stored comment

    Raises:
        HTTPException: 401 unauthenticated, 400 invalid, 404 post or parent missing
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            author_id=user_id,
            content=request.content,
            parent_comment_id=request.parent_comment_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Comment creation failed", post_id=str(post_id), error=str(e))
        raise to_http_exception(e)


@router.get("/comments/{comment_id}", response_model=CommentResponse)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentResponse:
    """Get a single comment."""
    try:
        return await get_comment_use_case.execute(comment_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CommentResponse:
    """Update a comment's content.

    Only the comment author can edit.

    Raises:
        HTTPException: 401 unauthenticated, 403 not the author, 404 missing
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id, user_id=user_id, content=request.content
        )
        return await update_comment_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Comment update failed", comment_id=str(comment_id), error=str(e))
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=DeleteResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> DeleteResponse:
    """Delete a comment with all its replies and likes.

    Only the comment author can delete.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/users/{username}/comments", response_model=list[CommentResponse])
async def list_user_comments(
    username: str,
    list_user_comments_use_case: FromDishka[ListUserCommentsUseCase],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> list[CommentResponse]:
    """List a user's comments, newest first."""
    try:
        return await list_user_comments_use_case.execute(
            ListUserCommentsRequest(username=username, limit=limit, offset=offset)
        )
    except DomainError as e:
        raise to_http_exception(e)
