"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogState(StrEnum):
    """Publication state of a blog post."""

    DRAFT = "draft"
    PUBLISHED = "published"


class BlogDB(SQLModel, table=True):
    """
    Blog database model for PostgreSQL.

    This model represents the blogs table in the database, with a foreign key
    relationship to the User model through `author_id`.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        Index("ix_blogs_tags_gin", "tags", postgresql_using="gin"),
        Index("ix_blogs_state_timestamp", "state", "timestamp"),
        Index("ix_blogs_author_state", "author_id", "state"),
        CheckConstraint("read_count >= 0", name="ck_blogs_read_count_non_negative"),
    )

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    author_id: UUID = Field(
        sa_column=Column(
            "author_id",
            ForeignKey("users.uuid", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Author ID (foreign key to users.uuid)",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(200), unique=True, nullable=False, index=True),
        description="Blog title (unique)",
    )
    body: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog body",
    )

    # Optional fields
    description: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Blog description",
    )

    # Metadata fields
    state: str = Field(
        default=BlogState.DRAFT,
        sa_column=Column(
            String(20),
            nullable=False,
            index=True,
            server_default=BlogState.DRAFT.value,
        ),
        description="Blog state (draft, published)",
    )
    read_count: int = Field(
        default=0,
        nullable=False,
        description="Number of public reads",
    )
    reading_time: int = Field(
        default=0,
        nullable=False,
        description="Estimated reading time in minutes",
    )

    # Array fields (stored as JSON in PostgreSQL)
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSONB, nullable=False),
        description="Blog tags",
    )

    # Timestamp (timezone-aware)
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "author_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Getting Started with Async Python",
                "description": "A short tour of asyncio",
                "body": "Async code lets a single thread juggle many requests...",
                "state": "draft",
                "read_count": 0,
                "reading_time": 1,
                "tags": ["python", "asyncio"],
            },
        },
    )
