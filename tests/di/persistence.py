"""Mock persistence provider for testing."""

from dishka import Scope, provide

from diu.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    PostLikeRepository,
    PostRepository,
    ProfileRepository,
    StampRepository,
)
from diu.persistence.repository.inmemory import (
    InMemoryCommentLikeRepository,
    InMemoryCommentRepository,
    InMemoryPostLikeRepository,
    InMemoryPostRepository,
    InMemoryProfileRepository,
    InMemoryStampRepository,
    InMemoryStore,
)
from diu.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the whole container, so data written in one request
    is visible in the next. Each test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, store: InMemoryStore) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_like_repository(self, store: InMemoryStore) -> PostLikeRepository:
        """Provide in-memory post like repository."""
        return InMemoryPostLikeRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, store: InMemoryStore
    ) -> CommentLikeRepository:
        """Provide in-memory comment like repository."""
        return InMemoryCommentLikeRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_stamp_repository(self, store: InMemoryStore) -> StampRepository:
        """Provide in-memory stamp repository."""
        return InMemoryStampRepository(store)
