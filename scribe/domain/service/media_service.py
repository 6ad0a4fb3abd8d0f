"""Media domain service.

Images are stored on an external media host; the domain only ever holds the
public URL it hands back.
"""

from abc import ABC, abstractmethod

import logfire

from scribe.config import MediaSettings
from scribe.domain.value import ImageUpload, MediaFolder

from .base import Service


class MediaUploader(ABC):
    """Port for the external media host."""

    @abstractmethod
    async def upload(self, image: ImageUpload, folder: str) -> str:
        """Upload an image and return its public URL.

        Args:
            image: Image bytes and content type
            folder: Destination folder on the media host

        Returns:
            Public (https) URL of the stored image

        Raises:
            MediaUploadError: If the host rejects the upload or is unreachable
        """
        pass


class MediaService(Service):
    """Routes uploads to the configured folder for each kind of image."""

    def __init__(self, uploader: MediaUploader, media_settings: MediaSettings) -> None:
        self.uploader = uploader
        self.media_settings = media_settings

    def _folder_for(self, folder: MediaFolder) -> str:
        if folder is MediaFolder.PROFILES:
            return self.media_settings.profile_folder
        return self.media_settings.blog_folder

    async def upload_image(self, image: ImageUpload, folder: MediaFolder) -> str:
        """Upload an image into one of the application folders."""
        destination = self._folder_for(folder)
        with logfire.span(
            "media_service.upload_image",
            folder=destination,
            size=image.size,
            content_type=image.content_type,
        ):
            url = await self.uploader.upload(image, destination)
            logfire.info("Image uploaded", folder=destination, url=url)
            return url

    async def upload_profile_image(self, image: ImageUpload) -> str:
        """Upload a user's profile image."""
        return await self.upload_image(image, MediaFolder.PROFILES)

    async def upload_blog_image(self, image: ImageUpload) -> str:
        """Upload a blog's cover image."""
        return await self.upload_image(image, MediaFolder.BLOGS)
