"""Domain value objects for Scribe.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from scribe.domain.value.common import RootValueObject, ValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Email(RootValueObject[str]):
    """User email address.

    Normalized to lowercase without surrounding whitespace, so lookups and
    the uniqueness check are case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        v = v.strip().lower()
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not _EMAIL_PATTERN.match(v):
            raise ValueError("Email address is not valid")
        return v


class MediaFolder(str, Enum):
    """Destination of an uploaded image on the media host."""

    PROFILES = "profiles"
    BLOGS = "blogs"


class ImageUpload(ValueObject):
    """An image received from a client, held in memory until uploaded."""

    content: bytes = Field(repr=False)
    content_type: str
    filename: str | None = None

    @property
    def size(self) -> int:
        """Size of the image in bytes."""
        return len(self.content)
