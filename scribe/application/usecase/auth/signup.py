"""Signup use case."""

import logfire
from pydantic import BaseModel, field_validator

from scribe.domain.error import AlreadyExistsError
from scribe.domain.service import JWTService, MediaService, UserService
from scribe.domain.value import Email, ImageUpload
from scribe.util.password import MAX_PASSWORD_BYTES

from scribe.application.usecase.view import UserView


class SignupRequest(BaseModel):
    """Signup request."""

    email: Email
    password: str
    profile_image: ImageUpload | None = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class SignupResponse(BaseModel):
    """Signup response."""

    user: UserView
    token: str


class SignupUseCase:
    """Use case for registering with email and password."""

    def __init__(
        self,
        user_service: UserService,
        media_service: MediaService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            media_service: Media domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.media_service = media_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Steps:
        1. Reject an email that is already registered
        2. Upload the profile image, if any
        3. Create the user with a hashed password
        4. Issue a token

        Nothing is written when step 1 or 2 fails.

        Raises:
            AlreadyExistsError: If the email is taken
            MediaUploadError: If the profile image upload fails
        """
        if await self.user_service.is_email_registered(request.email):
            raise AlreadyExistsError("User", request.email.root)

        profile_image = None
        if request.profile_image is not None:
            profile_image = await self.media_service.upload_profile_image(
                request.profile_image
            )

        user = await self.user_service.create_user(
            email=request.email,
            password=request.password,
            profile_image=profile_image,
        )
        token = self.jwt_service.create_token(user.id)

        logfire.info("User signed up", user_id=str(user.id))
        return SignupResponse(user=UserView.from_user(user), token=token)
