"""SQLAlchemy table definitions for the discussion service.

Repositories use SQLAlchemy Core against these tables and map rows to
immutable domain models by hand (see mappers.py).
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Foreign key names, matched when translating integrity errors
FK_COMMENTS_POST_ID = "fk_comments_post_id"
FK_COMMENTS_PARENT_ID = "fk_comments_parent_id"

# ============================================================================
# POSTS TABLE
# ============================================================================
# author_id references users owned by the external identity service
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_deleted_at", posts_table.c.deleted_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id",
        UUID,
        ForeignKey("posts.id", ondelete="CASCADE", name=FK_COMMENTS_POST_ID),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE", name=FK_COMMENTS_PARENT_ID),
        nullable=True,
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

# Serves the per-post chronological fetch used for tree assembly
Index(
    "idx_comments_post_created",
    comments_table.c.post_id,
    comments_table.c.created_at,
    comments_table.c.id,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
