"""
Blog schemas for the blogging API.

Request bodies use plain field names; responses are serialized with camelCase
aliases (`readCount`, `readingTime`, `totalPages`, ...).
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.configs.settings import MAX_TAGS_COUNT, MAX_TITLE_LENGTH

StateFilter = Literal["draft", "published"]


def _clean_tags(tags: list[str] | None) -> list[str] | None:
    if tags is None:
        return None
    return [tag.strip() for tag in tags if tag and tag.strip()]


class BlogCreate(BaseModel):
    """Blog creation model (request body, excludes server-computed fields)."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title (unique)",
        examples=["Getting Started with Async Python"],
    )
    description: str | None = Field(
        default=None,
        description="Short description of the post",
    )
    tags: list[str] = Field(
        default_factory=list,
        max_length=MAX_TAGS_COUNT,
        description="Tags for categorization",
        examples=[["python", "asyncio"]],
    )
    body: str = Field(
        ...,
        min_length=1,
        description="Blog body",
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        """Reject titles made only of whitespace."""
        value = value.strip()
        if not value:
            mssg = "Title cannot be blank"
            raise ValueError(mssg)
        return value

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, value: list[str]) -> list[str]:
        return _clean_tags(value) or []


class BlogUpdate(BaseModel):
    """
    Blog edit model.

    Every field is optional. Empty values (`""`, `[]`) are accepted but leave
    the stored value unchanged.
    """

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    description: str | None = None
    tags: list[str] | None = Field(default=None, max_length=MAX_TAGS_COUNT)
    body: str | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str | None) -> str | None:
        return value.strip() if value else value

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, value: list[str] | None) -> list[str] | None:
        return _clean_tags(value)


class AuthorSummary(BaseModel):
    """Author display information embedded in public blog responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class BlogResponse(BaseModel):
    """Blog response with the author as a bare identifier."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    description: str | None = None
    author: UUID
    state: StateFilter
    read_count: int = Field(alias="readCount", ge=0)
    reading_time: int = Field(alias="readingTime", ge=0)
    tags: list[str] = Field(default_factory=list)
    body: str
    timestamp: datetime


class BlogDetailResponse(BlogResponse):
    """Blog response with the author's name populated."""

    author: AuthorSummary | None = None  # type: ignore[assignment]


class BlogPage(BaseModel):
    """Paginated public listing."""

    model_config = ConfigDict(populate_by_name=True)

    blogs: list[BlogDetailResponse]
    total_pages: int = Field(alias="totalPages", ge=0)
    current_page: int = Field(alias="currentPage", ge=1)


class OwnBlogPage(BaseModel):
    """Paginated listing of the current user's blogs."""

    model_config = ConfigDict(populate_by_name=True)

    blogs: list[BlogResponse]
    total_pages: int = Field(alias="totalPages", ge=0)
    current_page: int = Field(alias="currentPage", ge=1)


class MessageResponse(BaseModel):
    """Plain message envelope."""

    msg: str
