"""Interface layer errors."""

from pydantic import ValidationError as PydanticValidationError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ValidationError(InterfaceError):
    """Request validation error."""

    pass


class UploadRejectedError(ValidationError):
    """An uploaded file is too large or not an allowed image type."""

    pass


def validation_message(error: ValueError) -> str:
    """Short client-facing message for a rejected input.

    Pydantic errors render as a multi-line dump with documentation links;
    only the first error's message is kept.
    """
    if isinstance(error, PydanticValidationError):
        errors = error.errors()
        if errors:
            return errors[0]["msg"].removeprefix("Value error, ")
    return str(error)
