"""Get profile use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.domain.service import UserService
from scribe.domain.value import UserId

from scribe.application.usecase.view import UserView


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # From the verified token


class GetProfileUseCase:
    """Use case for fetching the authenticated user's profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> UserView:
        """Return the caller's profile.

        Raises:
            NotFoundError: If the user was removed after the token was issued
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserView.from_user(user)
