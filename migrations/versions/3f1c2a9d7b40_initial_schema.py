"""initial_schema

Create the DIU schema:
- User profiles (username and bio keyed by the external user id)
- Posts (text and/or media)
- Post likes
- Comments (replies reference their parent comment)
- Comment likes
- Daily stamps

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from Postgres 13, pgcrypto covers older servers
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USER_PROFILES table
    # ========================================================================
    op.create_table(
        "user_profiles",
        _id_column(),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("username", sa.String(20), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", name="uq_user_profiles_user_id"),
        sa.UniqueConstraint("username", name="uq_user_profiles_username"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("media_key", sa.Text(), nullable=True),
        sa.Column(
            "media_type", sa.String(10), nullable=False, server_default="text"
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "content IS NOT NULL OR media_key IS NOT NULL",
            name="ck_posts_content_or_media",
        ),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # POST_LIKES table
    # ========================================================================
    op.create_table(
        "post_likes",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
    )
    op.create_index("idx_post_likes_user_id", "post_likes", ["user_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # COMMENT_LIKES table
    # ========================================================================
    op.create_table(
        "comment_likes",
        _id_column(),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "comment_id", "user_id", name="uq_comment_likes_comment_user"
        ),
    )
    op.create_index("idx_comment_likes_user_id", "comment_likes", ["user_id"])

    # ========================================================================
    # DAILY_STAMPS table
    # ========================================================================
    op.create_table(
        "daily_stamps",
        _id_column(),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("stamp_date", sa.Date(), nullable=False),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "stamp_date", name="uq_daily_stamps_user_date"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("daily_stamps")
    op.drop_index("idx_comment_likes_user_id", table_name="comment_likes")
    op.drop_table("comment_likes")
    op.drop_index("idx_comments_author_id", table_name="comments")
    op.drop_index("idx_comments_parent_comment_id", table_name="comments")
    op.drop_index("idx_comments_post_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_post_likes_user_id", table_name="post_likes")
    op.drop_table("post_likes")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_table("posts")
    op.drop_table("user_profiles")
