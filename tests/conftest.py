"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from diu.domain.model import Comment, Post
from diu.domain.value import CommentId, PostId, UserId

BASE_TIME = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_post(author_id: str = "author-1", content: str = "Test post") -> Post:
    """Helper to build a text post for tests."""
    return Post(
        id=PostId(uuid4()),
        author_id=UserId(author_id),
        content=content,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


def make_comment(
    post_id: PostId,
    content: str,
    parent_id: CommentId | None = None,
    author_id: str = "author-1",
    minutes: int = 0,
) -> Comment:
    """Helper to build a comment created ``minutes`` after the base time.

    Args:
        post_id: Post the comment belongs to
        content: Comment text
        parent_id: Parent comment for replies
        author_id: Author user ID
        minutes: Offset from BASE_TIME, larger means newer
    """
    created = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=UserId(author_id),
        content=content,
        parent_id=parent_id,
        created_at=created,
        updated_at=created,
    )
