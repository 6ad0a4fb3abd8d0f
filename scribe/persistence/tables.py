"""SQLAlchemy table definitions for Scribe.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),  # Stored lowercase
    Column("password_hash", String(255), nullable=False),
    Column("profile_image", Text, nullable=True),  # Media host URL
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email, unique=True)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("image", Text, nullable=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(title) > 0", name="title_not_empty"),
    CheckConstraint("length(description) > 0", name="description_not_empty"),
)

Index("idx_blogs_user_id_created_at", blogs_table.c.user_id, blogs_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# Replies are embedded as a JSONB array of {content, user_id, likes, created_at}.
# No ON DELETE CASCADE from blogs: deleting a blog removes its comments explicitly.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("blog_id", UUID, ForeignKey("blogs.id"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("replies", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(content) > 0", name="content_not_empty"),
)

Index(
    "idx_comments_blog_id_created_at",
    comments_table.c.blog_id,
    comments_table.c.created_at,
)
