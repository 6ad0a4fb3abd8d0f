"""PostgreSQL implementation of Blog repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Blog
from scribe.domain.repository import BlogRepository
from scribe.domain.value import BlogId, UserId
from scribe.persistence.mappers import blog_to_dict, row_to_blog
from scribe.persistence.tables import blogs_table


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def find_by_owner(self, user_id: UserId) -> List[Blog]:
        """Find blogs owned by a user, newest first."""
        stmt = (
            select(blogs_table)
            .where(blogs_table.c.user_id == user_id)
            .order_by(desc(blogs_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Owner and creation time are never rewritten on update.
        """
        blog_dict = blog_to_dict(blog)
        stmt = insert(blogs_table).values(**blog_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[blogs_table.c.id],
            set_={
                "title": stmt.excluded.title,
                "description": stmt.excluded.description,
                "image": stmt.excluded.image,
                "likes": stmt.excluded.likes,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return blog

    async def delete(self, blog_id: BlogId) -> None:
        """Delete a blog (hard delete)."""
        stmt = blogs_table.delete().where(blogs_table.c.id == blog_id)
        await self.session.execute(stmt)
        await self.session.flush()
