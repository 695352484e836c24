"""
Initial schema: Create users and blogs tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-01

- users: accounts with email/password credentials and display names
- blogs: posts with author, draft/published state, read counter and JSONB tags
"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# Revision identifiers, used by Alembic
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Apply schema changes for this revision."""
    op.create_table(
        "users",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_first_name", "users", ["first_name"], unique=False)
    op.create_index("ix_users_last_name", "users", ["last_name"], unique=False)

    op.create_table(
        "blogs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("state", sa.String(length=20), nullable=False, server_default="draft"),
        sa.Column("read_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reading_time", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("tags", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["users.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("read_count >= 0", name="ck_blogs_read_count_non_negative"),
    )
    op.create_index("ix_blogs_title", "blogs", ["title"], unique=True)
    op.create_index("ix_blogs_author_id", "blogs", ["author_id"], unique=False)
    op.create_index("ix_blogs_state", "blogs", ["state"], unique=False)
    op.create_index("ix_blogs_timestamp", "blogs", ["timestamp"], unique=False)
    # Composite indexes for the public and owner listings
    op.create_index("ix_blogs_state_timestamp", "blogs", ["state", "timestamp"], unique=False)
    op.create_index("ix_blogs_author_state", "blogs", ["author_id", "state"], unique=False)
    # GIN index for JSONB tags column
    op.create_index(
        "ix_blogs_tags_gin",
        "blogs",
        ["tags"],
        unique=False,
        postgresql_using="gin",
    )


def downgrade() -> None:
    """Revert schema changes for this revision."""
    op.drop_index("ix_blogs_tags_gin", table_name="blogs")
    op.drop_index("ix_blogs_author_state", table_name="blogs")
    op.drop_index("ix_blogs_state_timestamp", table_name="blogs")
    op.drop_index("ix_blogs_timestamp", table_name="blogs")
    op.drop_index("ix_blogs_state", table_name="blogs")
    op.drop_index("ix_blogs_author_id", table_name="blogs")
    op.drop_index("ix_blogs_title", table_name="blogs")
    op.drop_table("blogs")

    op.drop_index("ix_users_last_name", table_name="users")
    op.drop_index("ix_users_first_name", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
