"""In-memory user repository for testing."""

from typing import Iterable, Optional

from scribe.domain.error import AlreadyExistsError
from scribe.domain.model.user import User
from scribe.domain.repository.user import UserRepository
from scribe.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load several users at once."""
        return {uid: self._users[uid] for uid in set(user_ids) if uid in self._users}

    async def create(self, user: User) -> User:
        """Insert a user, enforcing email uniqueness like the database index."""
        if await self.find_by_email(user.email) is not None:
            raise AlreadyExistsError("User", user.email.root)
        self._users[user.id] = user
        return user
