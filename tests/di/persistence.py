"""Mock persistence providers for testing."""

from dishka import Scope, provide

from scribe.domain.repository import (
    BlogRepository,
    CommentRepository,
    UserRepository,
)
from scribe.persistence.repository.inmemory import (
    InMemoryBlogRepository,
    InMemoryCommentRepository,
    InMemoryUserRepository,
)
from scribe.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope: state survives across requests of one container, which the
    end-to-end tests rely on. Every test builds its own container, so tests
    stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_blog_repository(self) -> BlogRepository:
        """Provide in-memory blog repository."""
        return InMemoryBlogRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
