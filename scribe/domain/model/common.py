"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from scribe.domain.value import UserId


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; changes produce a new instance via
    ``model_copy(update=...)``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def unique_user_ids(user_ids: list[UserId]) -> list[UserId]:
    """Drop repeated ids from a likes list, keeping first-seen order."""
    return list(dict.fromkeys(user_ids))


def toggle_user_id(user_ids: list[UserId], user_id: UserId) -> list[UserId]:
    """Remove ``user_id`` if present, otherwise append it."""
    if user_id in user_ids:
        return [uid for uid in user_ids if uid != user_id]
    return [*user_ids, user_id]
