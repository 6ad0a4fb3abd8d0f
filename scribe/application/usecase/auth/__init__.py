"""Authentication use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
]
