"""Unit tests for LoginUseCase."""

import pytest
from dishka import AsyncContainer

from scribe.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from scribe.domain.error import InvalidCredentialsError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_any_email_case(self, unit_env: AsyncContainer):
        """Emails are matched case-insensitively."""
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        login = await unit_env.get(LoginUseCase)
        created = await signup.execute(
            SignupRequest(email="ann@example.com", password="s3cret")
        )

        # Act
        response = await login.execute(
            LoginRequest(email="  ANN@example.com ", password="s3cret")
        )

        # Assert
        assert response.user.id == created.user.id
        assert response.token

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [
            ("ann@example.com", "wrong"),
            ("nobody@example.com", "s3cret"),
            ("not-an-email", "s3cret"),
        ],
    )
    async def test_bad_credentials(
        self, unit_env: AsyncContainer, email: str, password: str
    ):
        """Every failure looks the same to the caller."""
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        login = await unit_env.get(LoginUseCase)
        await signup.execute(SignupRequest(email="ann@example.com", password="s3cret"))

        # Act & Assert
        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            await login.execute(LoginRequest(email=email, password=password))
