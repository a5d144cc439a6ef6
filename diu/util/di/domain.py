"""Domain layer DI providers."""

from dishka import Scope, provide

from diu.config import AuthSettings, StampSettings
from diu.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    PostLikeRepository,
    PostRepository,
    ProfileRepository,
    StampRepository,
)
from diu.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    PostService,
    ProfileService,
    StampService,
)
from diu.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service (stateless, shared)."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_like_service(
        self,
        post_like_repository: PostLikeRepository,
        comment_like_repository: CommentLikeRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            post_like_repository=post_like_repository,
            comment_like_repository=comment_like_repository,
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_stamp_service(
        self, stamp_repository: StampRepository, stamp_settings: StampSettings
    ) -> StampService:
        """Provide daily stamp domain service."""
        return StampService(
            stamp_repository=stamp_repository, stamp_settings=stamp_settings
        )
