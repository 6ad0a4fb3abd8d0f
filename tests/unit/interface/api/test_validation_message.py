"""Unit tests for client-facing validation messages."""

import pytest

from scribe.application.usecase.auth import SignupRequest
from scribe.interface.error import validation_message


class TestValidationMessage:
    def test_pydantic_error_is_reduced_to_first_message(self):
        with pytest.raises(ValueError) as exc_info:
            SignupRequest(email="ann@example.com", password="")

        message = validation_message(exc_info.value)

        assert message == "Password is required"
        assert "\n" not in message

    def test_plain_value_error_is_kept(self):
        assert validation_message(ValueError("Bad input")) == "Bad input"
