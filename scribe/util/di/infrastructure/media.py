"""Media host infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
from dishka import Scope, provide

from scribe.adapter.cloudinary.client import CloudinaryMediaUploader
from scribe.config import MediaSettings
from scribe.domain.service.media_service import MediaUploader
from scribe.util.di.base import ProviderBase


class MediaProvider(ProviderBase):
    """Media component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider uploading to Cloudinary."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_http_client(
        self, media_settings: MediaSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the HTTP client shared by all uploads.

        Closed when the container shuts down.
        """
        async with httpx.AsyncClient(timeout=media_settings.timeout_seconds) as client:
            yield client

    @provide
    def get_media_uploader(
        self, client: httpx.AsyncClient, media_settings: MediaSettings
    ) -> MediaUploader:
        """Provide Cloudinary media uploader."""
        return CloudinaryMediaUploader(client=client, settings=media_settings)
