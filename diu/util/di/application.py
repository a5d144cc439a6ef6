"""Application layer DI providers."""

from dishka import Scope, provide

from diu.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    ListUserCommentsUseCase,
    UpdateCommentUseCase,
)
from diu.application.usecase.like import (
    GetPostLikersUseCase,
    GetPostLikeStatusUseCase,
    ToggleCommentLikeUseCase,
    TogglePostLikeUseCase,
    UnlikePostUseCase,
)
from diu.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListMyPostsUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
    PostEnricher,
)
from diu.application.usecase.profile import (
    CheckUsernameUseCase,
    GetMyProfileUseCase,
    GetPublicProfileUseCase,
    SetupUsernameUseCase,
    UpdateProfileUseCase,
)
from diu.application.usecase.stamp import GetMyStampsUseCase, StampTodayUseCase
from diu.config import APISettings
from diu.domain.service import (
    CommentService,
    LikeService,
    PostService,
    ProfileService,
    StampService,
)
from diu.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        like_service: LikeService,
        profile_service: ProfileService,
        api_settings: APISettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            post_service=post_service,
            comment_service=comment_service,
            like_service=like_service,
            profile_service=profile_service,
            api_settings=api_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get single comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_comments_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        api_settings: APISettings,
    ) -> ListUserCommentsUseCase:
        """Provide list user comments use case."""
        return ListUserCommentsUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            api_settings=api_settings,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_like_use_case(
        self, comment_service: CommentService, like_service: LikeService
    ) -> ToggleCommentLikeUseCase:
        """Provide toggle comment like use case."""
        return ToggleCommentLikeUseCase(
            comment_service=comment_service, like_service=like_service
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_post_like_use_case(
        self, post_service: PostService, like_service: LikeService
    ) -> TogglePostLikeUseCase:
        """Provide toggle post like use case."""
        return TogglePostLikeUseCase(post_service=post_service, like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(
        self, post_service: PostService, like_service: LikeService
    ) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(post_service=post_service, like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_post_like_status_use_case(
        self, post_service: PostService, like_service: LikeService
    ) -> GetPostLikeStatusUseCase:
        """Provide post like status use case."""
        return GetPostLikeStatusUseCase(
            post_service=post_service, like_service=like_service
        )

    @provide(scope=Scope.REQUEST)
    def get_post_likers_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        profile_service: ProfileService,
        api_settings: APISettings,
    ) -> GetPostLikersUseCase:
        """Provide post likers use case."""
        return GetPostLikersUseCase(
            post_service=post_service,
            like_service=like_service,
            profile_service=profile_service,
            api_settings=api_settings,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_post_enricher(
        self,
        profile_service: ProfileService,
        like_service: LikeService,
        comment_service: CommentService,
    ) -> PostEnricher:
        """Provide post enricher shared by the post use cases."""
        return PostEnricher(
            profile_service=profile_service,
            like_service=like_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, post_enricher: PostEnricher
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, post_enricher=post_enricher)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, post_enricher: PostEnricher
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, post_enricher=post_enricher)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        post_enricher: PostEnricher,
        api_settings: APISettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            post_enricher=post_enricher,
            api_settings=api_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_my_posts_use_case(
        self,
        post_service: PostService,
        post_enricher: PostEnricher,
        api_settings: APISettings,
    ) -> ListMyPostsUseCase:
        """Provide list own posts use case."""
        return ListMyPostsUseCase(
            post_service=post_service,
            post_enricher=post_enricher,
            api_settings=api_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_posts_use_case(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        post_enricher: PostEnricher,
        api_settings: APISettings,
    ) -> ListUserPostsUseCase:
        """Provide list user posts use case."""
        return ListUserPostsUseCase(
            post_service=post_service,
            profile_service=profile_service,
            post_enricher=post_enricher,
            api_settings=api_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_setup_username_use_case(
        self, profile_service: ProfileService
    ) -> SetupUsernameUseCase:
        """Provide set up username use case."""
        return SetupUsernameUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_my_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetMyProfileUseCase:
        """Provide own profile use case."""
        return GetMyProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_check_username_use_case(
        self, profile_service: ProfileService
    ) -> CheckUsernameUseCase:
        """Provide username availability use case."""
        return CheckUsernameUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_public_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetPublicProfileUseCase:
        """Provide public profile use case."""
        return GetPublicProfileUseCase(profile_service=profile_service)

    # Stamp use cases
    @provide(scope=Scope.REQUEST)
    def get_stamp_today_use_case(
        self, stamp_service: StampService
    ) -> StampTodayUseCase:
        """Provide stamp today use case."""
        return StampTodayUseCase(stamp_service=stamp_service)

    @provide(scope=Scope.REQUEST)
    def get_my_stamps_use_case(self, stamp_service: StampService) -> GetMyStampsUseCase:
        """Provide own stamps use case."""
        return GetMyStampsUseCase(stamp_service=stamp_service)
