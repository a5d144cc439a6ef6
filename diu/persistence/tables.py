"""SQLAlchemy table definitions for DIU.

They match the schema defined in Alembic migrations.
User IDs are opaque strings issued by the identity provider, so they carry
no foreign key.
"""

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "user_profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", String(255), nullable=False),
    Column("username", String(20), nullable=False),
    Column("bio", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", name="uq_user_profiles_user_id"),
    UniqueConstraint("username", name="uq_user_profiles_username"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("author_id", String(255), nullable=False),
    Column("content", Text, nullable=True),
    Column("media_key", Text, nullable=True),  # Object storage key
    Column("media_type", String(10), nullable=False, server_default="text"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# POST LIKES TABLE
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
)

Index("idx_post_likes_user_id", post_likes_table.c.user_id)

# ============================================================================
# COMMENTS TABLE (self-referential reply tree)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_likes_comment_user"),
)

Index("idx_comment_likes_user_id", comment_likes_table.c.user_id)

# ============================================================================
# DAILY STAMPS TABLE
# ============================================================================
daily_stamps_table = Table(
    "daily_stamps",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", String(255), nullable=False),
    Column("stamp_date", Date, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "stamp_date", name="uq_daily_stamps_user_date"),
)
