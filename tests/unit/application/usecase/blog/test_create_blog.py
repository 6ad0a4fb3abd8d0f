"""Unit tests for CreateBlogUseCase."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer

from scribe.adapter.error import MediaUploadError
from scribe.application.usecase.blog import CreateBlogRequest, CreateBlogUseCase
from scribe.domain.repository import BlogRepository, UserRepository
from scribe.domain.service import MediaUploader
from scribe.domain.value import UserId
from tests.conftest import make_image, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateBlogUseCase:
    """Tests for CreateBlogUseCase."""

    @pytest.mark.asyncio
    async def test_creates_blog_with_uploaded_image(self, unit_env: AsyncContainer):
        """The blog stores the media host URL and starts without likes."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        owner = await user_repo.create(make_user())
        use_case = await unit_env.get(CreateBlogUseCase)

        # Act
        view = await use_case.execute(
            CreateBlogRequest(
                user_id=str(owner.id),
                title="Hello",
                description="World",
                image=make_image(),
            )
        )

        # Assert
        assert view.likes == []
        assert view.image.startswith("https://media.example.com/")
        assert view.user.email == owner.email.root

    @pytest.mark.asyncio
    async def test_failed_upload_stores_no_blog(self, unit_env: AsyncContainer):
        """Upload failure aborts creation before anything is written."""
        # Arrange
        uploader = await unit_env.get(MediaUploader)
        blog_repo = await unit_env.get(BlogRepository)
        uploader.fail = True
        owner_id = UserId(uuid4())
        use_case = await unit_env.get(CreateBlogUseCase)

        # Act & Assert
        with pytest.raises(MediaUploadError):
            await use_case.execute(
                CreateBlogRequest(
                    user_id=str(owner_id),
                    title="Hello",
                    description="World",
                    image=make_image(),
                )
            )
        assert await blog_repo.find_by_owner(owner_id) == []
