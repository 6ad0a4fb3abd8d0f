"""Unit tests for multipart image validation."""

from io import BytesIO

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from scribe.config import UploadSettings
from scribe.interface.api.upload import read_image
from scribe.interface.error import UploadRejectedError
from tests.conftest import PNG_BYTES


def _upload(content: bytes, content_type: str, filename: str = "pic.png") -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class TestReadImage:
    """Tests for read_image()."""

    @pytest.mark.asyncio
    async def test_no_part_means_no_image(self):
        assert await read_image(None, UploadSettings()) is None

    @pytest.mark.asyncio
    async def test_empty_part_means_no_image(self):
        """Browsers send an empty part when no file is picked."""
        upload = _upload(b"", "application/octet-stream", filename="")

        assert await read_image(upload, UploadSettings()) is None

    @pytest.mark.asyncio
    async def test_accepts_allowed_image(self):
        image = await read_image(_upload(PNG_BYTES, "image/png"), UploadSettings())

        assert image is not None
        assert image.content == PNG_BYTES
        assert image.content_type == "image/png"
        assert image.filename == "pic.png"

    @pytest.mark.asyncio
    async def test_rejects_non_image(self):
        with pytest.raises(UploadRejectedError, match="Only image files are allowed!"):
            await read_image(_upload(b"%PDF-1.4", "application/pdf"), UploadSettings())

    @pytest.mark.asyncio
    async def test_rejects_oversized_file(self):
        settings = UploadSettings(max_image_bytes=16)

        with pytest.raises(UploadRejectedError, match="File too large"):
            await read_image(_upload(b"x" * 17, "image/jpeg"), settings)

    @pytest.mark.asyncio
    async def test_file_at_limit_is_accepted(self):
        settings = UploadSettings(max_image_bytes=16)

        image = await read_image(_upload(b"x" * 16, "image/gif"), settings)

        assert image.size == 16
