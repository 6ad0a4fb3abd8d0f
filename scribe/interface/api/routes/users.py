"""User account routes: signup, login and profile."""

import logging

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from scribe.application.usecase.auth import (
    GetProfileRequest,
    GetProfileUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
)
from scribe.application.usecase.view import UserView
from scribe.config import UploadSettings
from scribe.domain.error import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)
from scribe.interface.api.auth import CurrentUserId
from scribe.interface.api.upload import read_image
from scribe.interface.error import UploadRejectedError, validation_message

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)

logger = logging.getLogger(__name__)


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    signup_use_case: FromDishka[SignupUseCase],
    upload_settings: FromDishka[UploadSettings],
    email: str = Form(...),
    password: str = Form(...),
    profile_image: UploadFile | None = File(default=None, alias="profileImage"),
) -> SignupResponse:
    """Register with email and password.

    Multipart form with an optional ``profileImage`` file.

    Returns:
        The new user and a bearer token

    Raises:
        HTTPException: 400 if the email is taken or the input is invalid
    """
    try:
        image = await read_image(profile_image, upload_settings)
        request = SignupRequest(email=email, password=password, profile_image=image)
        response = await signup_use_case.execute(request)
        logger.info(f"Signup successful for user: {response.user.id}")
        return response

    except AlreadyExistsError as e:
        logfire.warn("Signup for existing user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )
    except UploadRejectedError as e:
        logfire.warn("Signup image rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        logfire.warn("Signup validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )
    except Exception as e:
        logfire.error("Unexpected error during signup", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating user",
        )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Log in with email and password.

    Unknown email and wrong password produce the same 401.
    """
    try:
        response = await login_use_case.execute(request)
        logger.info(f"Login successful for user: {response.user.id}")
        return response

    except InvalidCredentialsError:
        logfire.warn("Login failed")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    except Exception as e:
        logfire.error("Unexpected error during login", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error logging in",
        )


@router.get("/profile", response_model=UserView)
async def get_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    user_id: CurrentUserId,
) -> UserView:
    """Get the authenticated user's profile.

    Requires authentication.
    """
    try:
        return await get_profile_use_case.execute(GetProfileRequest(user_id=user_id))

    except NotFoundError as e:
        logfire.warn("Profile for missing user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    except Exception as e:
        logfire.error("Unexpected error fetching profile", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching profile",
        )
