"""Unit tests for the Cloudinary uploader, using httpx's mock transport."""

import hashlib

import httpx
import pytest

from scribe.adapter.cloudinary import client as cloudinary_client
from scribe.adapter.cloudinary.client import CloudinaryMediaUploader, sign_params
from scribe.adapter.error import MediaUploadError
from scribe.config import MediaSettings
from tests.conftest import make_image

SETTINGS = MediaSettings(cloud_name="demo", api_key="key123", api_secret="shh")


def test_sign_params_sorts_and_appends_secret():
    """Signature is sha1 of sorted k=v pairs followed by the secret."""
    expected = hashlib.sha1(b"folder=blogs&timestamp=1700000000shh").hexdigest()

    assert sign_params({"timestamp": "1700000000", "folder": "blogs"}, "shh") == expected


class TestCloudinaryMediaUploader:
    """Tests for CloudinaryMediaUploader.upload()."""

    @pytest.mark.asyncio
    async def test_posts_signed_multipart_upload(self, monkeypatch):
        """Should POST the file with folder, api key and signature."""
        # Arrange
        monkeypatch.setattr(cloudinary_client.time, "time", lambda: 1700000000.5)
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"secure_url": "https://res.cloudinary.com/demo/x.png"}
            )

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            uploader = CloudinaryMediaUploader(http, SETTINGS)

            # Act
            url = await uploader.upload(make_image(), "blog-app/blogs")

        # Assert
        assert url == "https://res.cloudinary.com/demo/x.png"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.cloudinary.com/v1_1/demo/image/upload"
        body = request.content
        signature = sign_params(
            {"folder": "blog-app/blogs", "timestamp": "1700000000"}, "shh"
        )
        assert signature.encode() in body
        assert b"key123" in body
        assert b'filename="pic.png"' in body

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        """Non-2xx responses become MediaUploadError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": {"message": "bad key"}})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(MediaUploadError):
                await CloudinaryMediaUploader(http, SETTINGS).upload(
                    make_image(), "f"
                )

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Network failures become MediaUploadError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(MediaUploadError):
                await CloudinaryMediaUploader(http, SETTINGS).upload(
                    make_image(), "f"
                )

    @pytest.mark.asyncio
    async def test_missing_url_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"public_id": "x"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            with pytest.raises(MediaUploadError):
                await CloudinaryMediaUploader(http, SETTINGS).upload(
                    make_image(), "f"
                )
