"""Login use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.error import InvalidCredentialsError
from scribe.domain.service import JWTService, UserService
from scribe.domain.value import Email

from scribe.application.usecase.view import UserView


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    user: UserView
    token: str


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: Unknown email, malformed email, or wrong
                password; the caller cannot tell which
        """
        try:
            email = Email(request.email)
        except ValueError:
            raise InvalidCredentialsError()

        user = await self.user_service.authenticate(email, request.password)
        token = self.jwt_service.create_token(user.id)

        logfire.info("User logged in", user_id=str(user.id))
        return LoginResponse(user=UserView.from_user(user), token=token)
