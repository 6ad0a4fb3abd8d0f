"""Domain value objects for Scribe."""

from scribe.domain.value.identifiers import BlogId, CommentId, UserId
from scribe.domain.value.types import Email, ImageUpload, MediaFolder

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    # Types
    "Email",
    "ImageUpload",
    "MediaFolder",
]
