"""In-memory blog repository for testing."""

from typing import Optional

from scribe.domain.model.blog import Blog
from scribe.domain.repository.blog import BlogRepository
from scribe.domain.value import BlogId, UserId


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self) -> None:
        self._blogs: dict[BlogId, Blog] = {}

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        return self._blogs.get(blog_id)

    async def find_by_owner(self, user_id: UserId) -> list[Blog]:
        """Find blogs owned by a user, newest first."""
        blogs = [b for b in self._blogs.values() if b.user_id == user_id]
        blogs.sort(key=lambda b: b.created_at, reverse=True)
        return blogs

    async def save(self, blog: Blog) -> Blog:
        """Save or update a blog."""
        self._blogs[blog.id] = blog
        return blog

    async def delete(self, blog_id: BlogId) -> None:
        """Delete a blog."""
        self._blogs.pop(blog_id, None)
