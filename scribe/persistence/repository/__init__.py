"""PostgreSQL repository implementations."""

from scribe.persistence.repository.blog import PostgresBlogRepository
from scribe.persistence.repository.comment import PostgresCommentRepository
from scribe.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresBlogRepository",
    "PostgresCommentRepository",
]
