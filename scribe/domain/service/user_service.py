"""User domain service."""

import asyncio
from typing import Iterable
from uuid import uuid4

import logfire

from scribe.config import AuthSettings
from scribe.domain.error import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import Email, UserId
from scribe.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations.

    Owns credentials: password hashing and verification happen here, in a
    worker thread so bcrypt does not block the event loop.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def is_email_registered(self, email: Email) -> bool:
        """Whether a user already signed up with ``email``."""
        with logfire.span("user_service.is_email_registered", email=email.root):
            return await self.user_repository.find_by_email(email) is not None

    async def create_user(
        self,
        email: Email,
        password: str,
        profile_image: str | None = None,
    ) -> User:
        """Register a new user.

        Args:
            email: Normalized email
            password: Plain-text password
            profile_image: Already-uploaded profile image URL

        Returns:
            Created user

        Raises:
            AlreadyExistsError: If the email is taken
            ValueError: If the password cannot be hashed
        """
        with logfire.span("user_service.create_user", email=email.root):
            if await self.is_email_registered(email):
                logfire.warn("Signup with existing email", email=email.root)
                raise AlreadyExistsError("User", email.root)

            password_hash = await asyncio.to_thread(
                hash_password, password, self.auth_settings.bcrypt_rounds
            )
            user = User(
                id=UserId(uuid4()),
                email=email,
                password_hash=password_hash,
                profile_image=profile_image,
            )

            saved = await self.user_repository.create(user)
            logfire.info("User created", user_id=str(saved.id), email=email.root)
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check an email/password pair.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        with logfire.span("user_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user is None:
                logfire.warn("Login for unknown email", email=email.root)
                raise InvalidCredentialsError()

            matches = await asyncio.to_thread(
                verify_password, password, user.password_hash
            )
            if not matches:
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_authors(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load the users referenced by blogs, comments and replies."""
        ids = set(user_ids)
        with logfire.span("user_service.get_authors", count=len(ids)):
            return await self.user_repository.find_by_ids(ids)
