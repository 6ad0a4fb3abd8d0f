"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from scribe.domain.model.blog import Blog
from scribe.domain.value import BlogId, UserId


class BlogRepository(ABC):
    """Repository for Blog aggregate."""

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, user_id: UserId) -> List[Blog]:
        """Find every blog owned by a user, newest first.

        Args:
            user_id: The owner's user ID

        Returns:
            Blogs ordered by creation time, descending
        """
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Args:
            blog: The blog to save

        Returns:
            The saved blog
        """
        pass

    @abstractmethod
    async def delete(self, blog_id: BlogId) -> None:
        """Delete a blog (hard delete).

        Comments are not touched; callers remove them first.

        Args:
            blog_id: The blog ID to delete
        """
        pass
