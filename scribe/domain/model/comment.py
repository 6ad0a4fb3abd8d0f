"""Comment entity and its embedded replies.

Replies live inside their parent comment and have no identity of their
own: they are addressed by position in ``Comment.replies``.
"""

from datetime import datetime

from pydantic import Field, field_validator

from scribe.domain.model.common import (
    DomainModel,
    toggle_user_id,
    unique_user_ids,
    utcnow,
)
from scribe.domain.value import BlogId, CommentId, UserId


class Reply(DomainModel):
    """Reply embedded in a comment."""

    content: str = Field(min_length=1)
    user_id: UserId
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("likes")
    @classmethod
    def dedupe_likes(cls, v: list[UserId]) -> list[UserId]:
        """Keep likes as a set."""
        return unique_user_ids(v)


class Comment(DomainModel):
    """Comment on a blog.

    Business rules:
    - ``user_id`` (the author) never changes after creation
    - ``likes`` holds each user id at most once
    - ``replies`` only grows by appending
    """

    id: CommentId
    blog_id: BlogId
    user_id: UserId
    content: str = Field(min_length=1)
    likes: list[UserId] = Field(default_factory=list)
    replies: list[Reply] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("likes")
    @classmethod
    def dedupe_likes(cls, v: list[UserId]) -> list[UserId]:
        """Keep likes as a set."""
        return unique_user_ids(v)

    def is_authored_by(self, user_id: UserId) -> bool:
        """Whether ``user_id`` wrote this comment."""
        return self.user_id == user_id

    def toggle_like(self, user_id: UserId) -> "Comment":
        """Like the comment, or unlike it if ``user_id`` already likes it."""
        return self.model_copy(update={"likes": toggle_user_id(self.likes, user_id)})

    def add_reply(self, reply: Reply) -> "Comment":
        """Return a copy with ``reply`` appended after the existing replies."""
        return self.model_copy(update={"replies": [*self.replies, reply]})

    def author_ids(self) -> set[UserId]:
        """Ids of the comment author and every reply author."""
        return {self.user_id, *(reply.user_id for reply in self.replies)}
