"""Unit tests for UpdateBlogUseCase."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer

from scribe.adapter.error import MediaUploadError
from scribe.application.usecase.blog.update_blog import (
    UpdateBlogRequest,
    UpdateBlogUseCase,
)
from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.repository import UserRepository
from scribe.domain.service import BlogService, MediaUploader
from scribe.domain.value import UserId
from tests.conftest import make_image, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateBlogUseCase:
    """Tests for UpdateBlogUseCase."""

    @pytest.mark.asyncio
    async def test_owner_updates_text_and_keeps_image(self, unit_env: AsyncContainer):
        """Owner can edit; the old image stays when none is sent."""
        # Arrange
        blog_service = await unit_env.get(BlogService)
        user_repo = await unit_env.get(UserRepository)
        owner = await user_repo.create(make_user())
        blog = await blog_service.create_blog(
            owner.id, "Old", "Old body", image="https://img/old"
        )
        use_case = await unit_env.get(UpdateBlogUseCase)

        # Act
        view = await use_case.execute(
            UpdateBlogRequest(
                blog_id=str(blog.id),
                user_id=str(owner.id),
                title="New",
                description="New body",
            )
        )

        # Assert
        assert view.title == "New"
        assert view.description == "New body"
        assert view.image == "https://img/old"
        assert view.user.email == owner.email.root

    @pytest.mark.asyncio
    async def test_owner_replaces_image(self, unit_env: AsyncContainer):
        # Arrange
        blog_service = await unit_env.get(BlogService)
        owner_id = UserId(uuid4())
        blog = await blog_service.create_blog(owner_id, "T", "D", image="https://img/old")
        use_case = await unit_env.get(UpdateBlogUseCase)

        # Act
        view = await use_case.execute(
            UpdateBlogRequest(
                blog_id=str(blog.id),
                user_id=str(owner_id),
                title="T",
                description="D",
                image=make_image(),
            )
        )

        # Assert
        assert view.image.startswith("https://media.example.com/")

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env: AsyncContainer):
        """Someone else's edit is refused and the blog is unchanged."""
        # Arrange
        blog_service = await unit_env.get(BlogService)
        blog = await blog_service.create_blog(UserId(uuid4()), "Mine", "Body")
        use_case = await unit_env.get(UpdateBlogUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateBlogRequest(
                    blog_id=str(blog.id),
                    user_id=str(uuid4()),
                    title="Hijacked",
                    description="Body",
                )
            )
        assert await blog_service.get_blog_by_id(blog.id) == blog

    @pytest.mark.asyncio
    async def test_failed_upload_leaves_blog_unchanged(self, unit_env: AsyncContainer):
        # Arrange
        blog_service = await unit_env.get(BlogService)
        uploader = await unit_env.get(MediaUploader)
        owner_id = UserId(uuid4())
        blog = await blog_service.create_blog(owner_id, "T", "D")
        uploader.fail = True
        use_case = await unit_env.get(UpdateBlogUseCase)

        # Act & Assert
        with pytest.raises(MediaUploadError):
            await use_case.execute(
                UpdateBlogRequest(
                    blog_id=str(blog.id),
                    user_id=str(owner_id),
                    title="Changed",
                    description="D",
                    image=make_image(),
                )
            )
        assert (await blog_service.get_blog_by_id(blog.id)).title == "T"

    @pytest.mark.asyncio
    async def test_missing_blog(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(UpdateBlogUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateBlogRequest(
                    blog_id=str(uuid4()),
                    user_id=str(uuid4()),
                    title="T",
                    description="D",
                )
            )
