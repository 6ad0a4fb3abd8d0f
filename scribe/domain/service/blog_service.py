"""Blog domain service."""

from uuid import uuid4

import logfire

from scribe.domain.model import Blog
from scribe.domain.repository import BlogRepository
from scribe.domain.value import BlogId, UserId

from .base import Service


class BlogService(Service):
    """Domain service for blog operations."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
        """
        self.blog_repository = blog_repository

    async def create_blog(
        self,
        owner_id: UserId,
        title: str,
        description: str,
        image: str | None = None,
    ) -> Blog:
        """Create a blog with no likes.

        Args:
            owner_id: Owning user ID
            title: Blog title
            description: Blog body
            image: Already-uploaded image URL

        Returns:
            Created blog
        """
        with logfire.span("blog_service.create_blog", owner_id=str(owner_id)):
            blog = Blog(
                id=BlogId(uuid4()),
                title=title,
                description=description,
                image=image,
                user_id=owner_id,
            )
            saved = await self.blog_repository.save(blog)
            logfire.info("Blog created", blog_id=str(saved.id), owner_id=str(owner_id))
            return saved

    async def get_blog_by_id(self, blog_id: BlogId) -> Blog | None:
        """Get a blog by ID.

        Args:
            blog_id: Blog ID

        Returns:
            Blog if found, None otherwise
        """
        with logfire.span("blog_service.get_blog_by_id", blog_id=str(blog_id)):
            blog = await self.blog_repository.find_by_id(blog_id)
            if blog is None:
                logfire.warn("Blog not found", blog_id=str(blog_id))
            return blog

    async def list_blogs_for_owner(self, owner_id: UserId) -> list[Blog]:
        """List a user's blogs, newest first."""
        with logfire.span("blog_service.list_blogs_for_owner", owner_id=str(owner_id)):
            blogs = await self.blog_repository.find_by_owner(owner_id)
            logfire.info("Blogs listed", owner_id=str(owner_id), count=len(blogs))
            return blogs

    async def update_content(
        self,
        blog: Blog,
        title: str,
        description: str,
        image: str | None = None,
    ) -> Blog:
        """Overwrite title and description; replace the image only if given."""
        with logfire.span("blog_service.update_content", blog_id=str(blog.id)):
            changes: dict[str, str] = {"title": title, "description": description}
            if image is not None:
                changes["image"] = image

            # Re-validate so empty strings are rejected like on create
            updated = Blog.model_validate({**blog.model_dump(), **changes})
            saved = await self.blog_repository.save(updated)
            logfire.info(
                "Blog updated", blog_id=str(blog.id), image_replaced=image is not None
            )
            return saved

    async def toggle_like(self, blog: Blog, user_id: UserId) -> Blog:
        """Flip ``user_id``'s like on a blog.

        Load-modify-save without a lock: concurrent toggles on the same blog
        resolve last-write-wins.
        """
        with logfire.span(
            "blog_service.toggle_like", blog_id=str(blog.id), user_id=str(user_id)
        ):
            updated = blog.toggle_like(user_id)
            saved = await self.blog_repository.save(updated)
            logfire.info(
                "Blog like toggled",
                blog_id=str(blog.id),
                user_id=str(user_id),
                liked=user_id in saved.likes,
            )
            return saved

    async def delete_blog(self, blog_id: BlogId) -> None:
        """Delete a blog record. Its comments must already be gone."""
        with logfire.span("blog_service.delete_blog", blog_id=str(blog_id)):
            await self.blog_repository.delete(blog_id)
            logfire.info("Blog deleted", blog_id=str(blog_id))
