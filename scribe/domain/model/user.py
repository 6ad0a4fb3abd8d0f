"""User aggregate root.

Users register with an email and password and may carry a profile image
hosted on the media host.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from scribe.domain.model.common import DomainModel, utcnow
from scribe.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: Email
    password_hash: str = Field(repr=False)
    profile_image: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
