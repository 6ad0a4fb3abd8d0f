"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from scribe.domain.model.comment import Comment
from scribe.domain.value import BlogId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Replies are stored inside their comment and are saved with it.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_blog(self, blog_id: BlogId) -> List[Comment]:
        """Find all comments on a blog, newest first.

        Args:
            blog_id: The blog ID

        Returns:
            Comments ordered by creation time, descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update), replies included.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment on a blog.

        Args:
            blog_id: The blog whose comments are removed

        Returns:
            Number of comments deleted
        """
        pass
