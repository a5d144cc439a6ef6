"""Like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from diu.application.usecase.like import (
    GetPostLikersRequest,
    GetPostLikersUseCase,
    GetPostLikeStatusUseCase,
    LikeStateResponse,
    PostLikeRequest,
    PostLikerItem,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
    TogglePostLikeUseCase,
    UnlikePostUseCase,
)
from diu.domain.error import DomainError
from diu.domain.service import JWTService
from diu.interface.api.dependencies import get_auth_token, require_user_id
from diu.interface.error import to_http_exception

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


@router.post("/comments/{comment_id}/like", response_model=LikeStateResponse)
async def toggle_comment_like(
    comment_id: UUID,
    toggle_comment_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> LikeStateResponse:
    """Like a comment, or remove the like if already liked.

    Requires authentication.

    Args:
        comment_id: Comment UUID
        toggle_comment_like_use_case: Toggle use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Bearer token

    Returns:
        ``{liked, likeCount}`` after the toggle
    """
    user_id = require_user_id(jwt_service, auth_token, "like comments")

    try:
        return await toggle_comment_like_use_case.execute(
            ToggleCommentLikeRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/posts/{post_id}/like", response_model=LikeStateResponse)
async def toggle_post_like(
    post_id: UUID,
    toggle_post_like_use_case: FromDishka[TogglePostLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> LikeStateResponse:
    """Like a post, or remove the like if already liked."""
    user_id = require_user_id(jwt_service, auth_token, "like posts")

    try:
        return await toggle_post_like_use_case.execute(
            PostLikeRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/posts/{post_id}/like", response_model=LikeStateResponse)
async def unlike_post(
    post_id: UUID,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> LikeStateResponse:
    """Remove the requester's like from a post (no-op if not liked)."""
    user_id = require_user_id(jwt_service, auth_token, "unlike posts")

    try:
        return await unlike_post_use_case.execute(
            PostLikeRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/posts/{post_id}/likes/me", response_model=LikeStateResponse)
async def get_post_like_status(
    post_id: UUID,
    get_post_like_status_use_case: FromDishka[GetPostLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> LikeStateResponse:
    """Whether the requester likes a post, plus its like count."""
    user_id = require_user_id(jwt_service, auth_token, "read like status")

    try:
        return await get_post_like_status_use_case.execute(
            PostLikeRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/posts/{post_id}/likes", response_model=list[PostLikerItem])
async def list_post_likers(
    post_id: UUID,
    get_post_likers_use_case: FromDishka[GetPostLikersUseCase],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> list[PostLikerItem]:
    """Who liked a post, newest first. Public."""
    try:
        return await get_post_likers_use_case.execute(
            GetPostLikersRequest(post_id=post_id, limit=limit, offset=offset)
        )
    except DomainError as e:
        raise to_http_exception(e)
