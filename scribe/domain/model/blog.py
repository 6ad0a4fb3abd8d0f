"""Blog aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from scribe.domain.model.common import (
    DomainModel,
    toggle_user_id,
    unique_user_ids,
    utcnow,
)
from scribe.domain.value import BlogId, UserId


class Blog(DomainModel):
    """Blog post owned by a single user.

    Business rules:
    - ``user_id`` (the owner) never changes after creation
    - ``likes`` holds each user id at most once
    """

    id: BlogId
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image: Optional[str] = None
    user_id: UserId
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("likes")
    @classmethod
    def dedupe_likes(cls, v: list[UserId]) -> list[UserId]:
        """Keep likes as a set."""
        return unique_user_ids(v)

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether ``user_id`` owns this blog."""
        return self.user_id == user_id

    def toggle_like(self, user_id: UserId) -> "Blog":
        """Like the blog, or unlike it if ``user_id`` already likes it."""
        return self.model_copy(update={"likes": toggle_user_id(self.likes, user_id)})
