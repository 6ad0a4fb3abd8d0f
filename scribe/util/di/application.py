"""Application layer DI providers."""

from dishka import Scope, provide

from scribe.application.usecase.auth import (
    GetProfileUseCase,
    LoginUseCase,
    SignupUseCase,
)
from scribe.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    LikeBlogUseCase,
    ListBlogsUseCase,
    UpdateBlogUseCase,
)
from scribe.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    LikeCommentUseCase,
)
from scribe.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    MediaService,
    UserService,
)
from scribe.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(
        self,
        user_service: UserService,
        media_service: MediaService,
        jwt_service: JWTService,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            media_service=media_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    # Blog use cases
    @provide
    def get_create_blog_use_case(
        self,
        blog_service: BlogService,
        media_service: MediaService,
        user_service: UserService,
    ) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(
            blog_service=blog_service,
            media_service=media_service,
            user_service=user_service,
        )

    @provide
    def get_list_blogs_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(blog_service=blog_service, user_service=user_service)

    @provide
    def get_get_blog_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(blog_service=blog_service, user_service=user_service)

    @provide
    def get_update_blog_use_case(
        self,
        blog_service: BlogService,
        media_service: MediaService,
        user_service: UserService,
    ) -> UpdateBlogUseCase:
        """Provide update blog use case."""
        return UpdateBlogUseCase(
            blog_service=blog_service,
            media_service=media_service,
            user_service=user_service,
        )

    @provide
    def get_delete_blog_use_case(
        self, blog_service: BlogService, comment_service: CommentService
    ) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(
            blog_service=blog_service, comment_service=comment_service
        )

    @provide
    def get_like_blog_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> LikeBlogUseCase:
        """Provide like blog use case."""
        return LikeBlogUseCase(blog_service=blog_service, user_service=user_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            user_service=user_service,
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_like_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_create_reply_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            comment_service=comment_service, user_service=user_service
        )
