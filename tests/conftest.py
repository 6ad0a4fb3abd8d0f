"""Test configuration and fixtures."""

import os

# Must be set before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")  # bcrypt minimum, keeps tests fast

from uuid import uuid4  # noqa: E402

from scribe.domain.model import User  # noqa: E402
from scribe.domain.value import Email, ImageUpload, UserId  # noqa: E402

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def make_user(email: str = "writer@example.com", **kwargs) -> User:
    """Build a user with a placeholder password hash."""
    return User(
        id=kwargs.pop("id", UserId(uuid4())),
        email=Email(email),
        password_hash=kwargs.pop("password_hash", "not-a-real-hash"),
        **kwargs,
    )


def make_image(
    content_type: str = "image/png", content: bytes = PNG_BYTES
) -> ImageUpload:
    """Build an in-memory image upload."""
    return ImageUpload(content=content, content_type=content_type, filename="pic.png")
