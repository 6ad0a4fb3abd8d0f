"""Domain model entities for Scribe."""

from scribe.domain.model.blog import Blog
from scribe.domain.model.comment import Comment, Reply
from scribe.domain.model.user import User

__all__ = [
    "User",
    "Blog",
    "Comment",
    "Reply",
]
