"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status

from diu.application.usecase.base import CamelModel
from diu.application.usecase.comment import DeleteResponse
from diu.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListMyPostsRequest,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    PostItem,
)
from diu.domain.error import DomainError
from diu.domain.service import JWTService
from diu.domain.value import MediaType
from diu.interface.api.dependencies import get_auth_token, require_user_id
from diu.interface.error import to_http_exception

router = APIRouter(tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(CamelModel):
    """API request for creating a post."""

    content: str | None = None
    media_key: str | None = None  # Key returned by the upload service
    media_type: MediaType | None = None


@router.post("/posts", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> PostItem:
    """Publish a post with text, media or both.

    Requires authentication.

    Args:
        request: Post content
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Bearer token

    Returns:
        The created post
    """
    user_id = require_user_id(jwt_service, auth_token, "create posts")

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                content=request.content,
                media_key=request.media_key,
                media_type=request.media_type,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/posts", response_model=list[PostItem])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Depends(get_auth_token),
) -> list[PostItem]:
    """Public feed, newest first.

    ``hasLiked`` reflects the requester's likes when a valid token is sent.
    """
    request = ListPostsRequest(
        viewer_id=jwt_service.get_user_id_from_token(auth_token),
        limit=limit,
        offset=offset,
    )
    return await list_posts_use_case.execute(request)


@router.get("/users/me/posts", response_model=list[PostItem])
async def list_my_posts(
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Depends(get_auth_token),
) -> list[PostItem]:
    """The requester's own posts, newest first."""
    user_id = require_user_id(jwt_service, auth_token, "list your posts")
    return await list_my_posts_use_case.execute(
        ListMyPostsRequest(user_id=user_id, limit=limit, offset=offset)
    )


# Declared after /users/me/posts so "me" is never taken for a username
@router.get("/users/{username}/posts", response_model=list[PostItem])
async def list_user_posts(
    username: str,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Depends(get_auth_token),
) -> list[PostItem]:
    """A user's posts by username, newest first."""
    try:
        return await list_user_posts_use_case.execute(
            ListUserPostsRequest(
                username=username,
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
                limit=limit,
                offset=offset,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

@router.get("/posts/{post_id}", response_model=PostItem)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> PostItem:
    """Get a single post with its counts."""
    try:
        return await get_post_use_case.execute(
            GetPostRequest(
                post_id=post_id,
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/posts/{post_id}", response_model=DeleteResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> DeleteResponse:
    """Delete a post with its comments and likes.

    Only the post author can delete.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete posts")

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
