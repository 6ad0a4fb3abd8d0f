"""Cloudinary media uploader.

Uploads go through Cloudinary's signed upload API:
``POST {upload_base_url}/{cloud_name}/image/upload`` with the file as a
multipart part and a SHA-1 signature over the signed parameters.
"""

import hashlib
import time
from uuid import uuid4

import httpx
import logfire

from scribe.adapter.error import MediaUploadError
from scribe.config import MediaSettings
from scribe.domain.service.media_service import MediaUploader
from scribe.domain.value import ImageUpload


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Compute a Cloudinary request signature.

    Parameters are sorted by name, joined as ``k=v`` pairs with ``&`` and the
    API secret is appended before hashing.

    Args:
        params: Parameters to sign (never ``file`` or ``api_key``)
        api_secret: Cloudinary API secret

    Returns:
        Hex SHA-1 digest
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryMediaUploader(MediaUploader):
    """Media uploader backed by the Cloudinary upload API."""

    def __init__(self, client: httpx.AsyncClient, settings: MediaSettings) -> None:
        """Initialize uploader.

        Args:
            client: Shared HTTP client (owned by the DI container)
            settings: Cloudinary credentials and endpoint
        """
        self.client = client
        self.settings = settings

    async def upload(self, image: ImageUpload, folder: str) -> str:
        """Upload an image and return its ``secure_url``."""
        signed = {"folder": folder, "timestamp": str(int(time.time()))}
        data = {
            **signed,
            "api_key": self.settings.api_key,
            "signature": sign_params(signed, self.settings.api_secret),
        }
        files = {
            "file": (
                image.filename or "upload",
                image.content,
                image.content_type,
            )
        }

        try:
            response = await self.client.post(
                self.settings.upload_url,
                data=data,
                files=files,
                timeout=self.settings.timeout_seconds,
            )
        except httpx.HTTPError as e:
            logfire.error("Cloudinary upload HTTP error", folder=folder, error=str(e))
            raise MediaUploadError(f"HTTP error during upload: {e}") from e

        if response.status_code >= 300:
            logfire.error(
                "Cloudinary upload failed",
                status_code=response.status_code,
                error=response.text,
                folder=folder,
            )
            raise MediaUploadError(f"Upload failed: {response.status_code}")

        try:
            url = response.json()["secure_url"]
        except (ValueError, KeyError) as e:
            logfire.error("Cloudinary response missing secure_url", folder=folder)
            raise MediaUploadError("Upload response did not include a URL") from e

        logfire.info("Cloudinary upload complete", folder=folder, url=url)
        return url


class MockMediaUploader(MediaUploader):
    """Mock uploader for testing.

    Returns deterministic URLs without any network access and remembers what
    it was asked to upload.
    """

    def __init__(self, base_url: str = "https://media.example.com") -> None:
        self.base_url = base_url
        self.fail = False
        self.uploads: list[tuple[str, ImageUpload]] = []

    async def upload(self, image: ImageUpload, folder: str) -> str:
        """Record the upload and return a fake URL, or fail if asked to."""
        if self.fail:
            raise MediaUploadError("Mock upload failure")

        self.uploads.append((folder, image))
        return f"{self.base_url}/{folder}/{uuid4().hex}"
