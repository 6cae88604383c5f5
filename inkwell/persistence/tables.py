"""SQLAlchemy table definitions for Inkwell.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the site's account system, referenced here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ARTICLES TABLE (owned by publishing, read-only here)
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(200), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_articles_slug", articles_table.c.slug, unique=True)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Deleting a comment deletes its whole subtree
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
    # Display name for anonymous comments, denormalized user name otherwise
    Column("author_name", String(255), nullable=True),
    Column("content", Text, nullable=False),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "read_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(user_id IS NOT NULL OR author_name IS NOT NULL)",
        name="comment_author_required",
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index(
    "idx_comments_unread",
    comments_table.c.created_at,
    postgresql_where=comments_table.c.is_read.is_(False),
)
