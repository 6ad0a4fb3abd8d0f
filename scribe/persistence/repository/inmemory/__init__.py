"""In-memory repository implementations for testing."""

from .blog import InMemoryBlogRepository
from .comment import InMemoryCommentRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBlogRepository",
    "InMemoryCommentRepository",
    "InMemoryUserRepository",
]
