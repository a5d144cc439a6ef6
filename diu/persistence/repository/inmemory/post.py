"""In-memory post repository for testing."""

from typing import Optional

from diu.domain.model.post import Post
from diu.domain.repository.post import PostRepository
from diu.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _newest_first(self, posts: list[Post]) -> list[Post]:
        return sorted(reversed(posts), key=lambda p: p.created_at, reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_recent(self, limit: int = 20, offset: int = 0) -> list[Post]:
        """Find posts for the feed, newest first."""
        posts = self._newest_first(list(self._store.posts.values()))
        return posts[offset : offset + limit]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts by a specific author."""
        posts = self._newest_first(
            [p for p in self._store.posts.values() if p.author_id == author_id]
        )
        return posts[offset : offset + limit]

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its comments and likes."""
        return self._store.delete_post(post_id)
