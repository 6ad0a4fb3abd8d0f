"""Unit tests for MediaService folder routing."""

import pytest

from scribe.adapter.cloudinary.client import MockMediaUploader
from scribe.config import MediaSettings
from scribe.domain.service import MediaService
from tests.conftest import make_image


class TestMediaService:
    """Tests for MediaService uploads."""

    @pytest.mark.asyncio
    async def test_profile_and_blog_images_use_their_folders(self):
        """Each kind of image goes to its configured folder."""
        uploader = MockMediaUploader()
        service = MediaService(
            uploader, MediaSettings(profile_folder="p", blog_folder="b")
        )

        profile_url = await service.upload_profile_image(make_image())
        blog_url = await service.upload_blog_image(make_image())

        assert [folder for folder, _ in uploader.uploads] == ["p", "b"]
        assert profile_url.startswith("https://media.example.com/p/")
        assert blog_url.startswith("https://media.example.com/b/")
