"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from diu.domain.model.comment import Comment
from diu.domain.model.common import utc_now
from diu.domain.repository.comment import CommentRepository
from diu.domain.value import CommentId, PostId, UserId

from .store import InMemoryStore


def newest_first(comments: list[Comment]) -> list[Comment]:
    """Sort newest first; ties keep the later insert first."""
    return sorted(reversed(comments), key=lambda c: c.created_at, reverse=True)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, newest first."""
        return newest_first(
            [c for c in self._store.comments.values() if c.post_id == post_id]
        )

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments by a specific author."""
        comments = newest_first(
            [c for c in self._store.comments.values() if c.author_id == author_id]
        )
        return comments[offset : offset + limit]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        comment = self._store.comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(update={"content": content, "updated_at": utc_now()})
        self._store.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment with its replies and likes."""
        return self._store.delete_comment(comment_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count comments per post."""
        counts = {post_id: 0 for post_id in post_ids}
        for comment in self._store.comments.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts
