"""Multipart image handling."""

from fastapi import UploadFile

from scribe.config import UploadSettings
from scribe.domain.value import ImageUpload
from scribe.interface.error import UploadRejectedError


async def read_image(
    upload: UploadFile | None, settings: UploadSettings
) -> ImageUpload | None:
    """Read and validate an optional image part.

    An absent or empty part means "no image".

    Args:
        upload: File part from the multipart form
        settings: Size and content type limits

    Returns:
        The image held in memory, or None

    Raises:
        UploadRejectedError: Disallowed content type or file too large
    """
    if upload is None:
        return None

    content_type = (upload.content_type or "").lower()
    # Read one byte past the limit so oversize files are detected without
    # buffering all of them
    content = await upload.read(settings.max_image_bytes + 1)
    if not content:
        return None

    if content_type not in settings.allowed_content_types:
        raise UploadRejectedError("Only image files are allowed!")
    if len(content) > settings.max_image_bytes:
        raise UploadRejectedError("File too large")

    return ImageUpload(
        content=content, content_type=content_type, filename=upload.filename
    )
