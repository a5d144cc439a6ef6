"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of with SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from diu.domain.model import Comment, CommentLike, DailyStamp, Post, PostLike, Profile
from diu.domain.value import (
    CommentId,
    CommentLikeId,
    MediaType,
    PostId,
    PostLikeId,
    ProfileId,
    StampId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    """asyncpg returns UUID objects; other drivers may return strings."""
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        username=Username(row["username"]),
        bio=row.get("bio"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(row["author_id"]),
        content=row.get("content"),
        media_key=row.get("media_key"),
        media_type=MediaType(row["media_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump()
    data["media_type"] = post.media_type.value
    return data


def row_to_post_like(row: Dict[str, Any]) -> PostLike:
    """Convert database row to PostLike domain model."""
    return PostLike(
        id=PostLikeId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The table column is ``parent_comment_id``; the model calls it ``parent_id``.
    """
    parent = row.get("parent_comment_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_id=CommentId(_uuid(parent)) if parent else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["parent_comment_id"] = data.pop("parent_id")
    return data


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        id=CommentLikeId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def row_to_stamp(row: Dict[str, Any]) -> DailyStamp:
    """Convert database row to DailyStamp domain model."""
    return DailyStamp(
        id=StampId(_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        stamp_date=row["stamp_date"],
        created_at=row["created_at"],
    )
