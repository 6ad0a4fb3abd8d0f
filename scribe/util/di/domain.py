"""Domain layer DI providers."""

from dishka import Scope, provide

from scribe.config import AuthSettings, MediaSettings
from scribe.domain.repository import (
    BlogRepository,
    CommentRepository,
    UserRepository,
)
from scribe.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    MediaService,
    MediaUploader,
    UserService,
)
from scribe.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_media_service(
        self, uploader: MediaUploader, media_settings: MediaSettings
    ) -> MediaService:
        """Provide media domain service."""
        return MediaService(uploader=uploader, media_settings=media_settings)
