"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Comment
from scribe.domain.repository import CommentRepository
from scribe.domain.value import BlogId, CommentId
from scribe.persistence.mappers import comment_to_dict, row_to_comment
from scribe.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_blog(self, blog_id: BlogId) -> List[Comment]:
        """Find all comments on a blog, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Only likes and replies change after creation.
        """
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={
                "likes": stmt.excluded.likes,
                "replies": stmt.excluded.replies,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment on a blog."""
        stmt = comments_table.delete().where(comments_table.c.blog_id == blog_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
