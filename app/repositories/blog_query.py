"""
Blog listing query construction.

Turns listing parameters into a `BlogQueryPlan`: the filter, sort and
pagination for one page of blogs, plus the matching count query. Search
across author names is resolved in two sequential lookups (matching users
first, then posts) rather than a join.
"""

from dataclasses import dataclass, field
from math import ceil
from typing import Protocol
from uuid import UUID

from sqlalchemy import ColumnElement, Select, desc, exists, func, or_, select

from app.configs import settings
from app.models.blog import BlogDB, BlogState

ORDERABLE_COLUMNS = {
    "read_count": "read_count",
    "reading_time": "reading_time",
    "timestamp": "timestamp",
}


class AuthorLookup(Protocol):
    """The user lookup the query builder needs for author-name search."""

    async def find_ids_by_name(self, text: str) -> list[UUID]: ...


@dataclass(frozen=True)
class BlogListQuery:
    """
    Listing parameters for the public blog listing.

    Parameters
    ----------
    page : int
        1-indexed page number.
    limit : int
        Page size.
    search : str | None
        Free text matched against titles, tags and author names.
    state : str | None
        Overrides the default `published` state filter.
    order_by : str | None
        `read_count`, `reading_time` or `timestamp`; anything else is unsorted.
    """

    page: int = 1
    limit: int = settings.DEFAULT_PAGE_SIZE
    search: str | None = None
    state: str | None = None
    order_by: str | None = None


@dataclass(frozen=True)
class BlogQueryPlan:
    """Filter, sort and pagination for one page of blogs."""

    page: int
    limit: int
    state: str | None = None
    author_id: UUID | None = None
    search: str | None = None
    search_author_ids: tuple[UUID, ...] = field(default_factory=tuple)
    order_by: str | None = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def conditions(self) -> list[ColumnElement[bool]]:
        """Return the WHERE conditions shared by the page and count queries."""
        clauses: list[ColumnElement[bool]] = []
        if self.state:
            clauses.append(BlogDB.state == self.state)
        if self.author_id is not None:
            clauses.append(BlogDB.author_id == self.author_id)
        if self.search:
            clauses.append(search_condition(self.search, self.search_author_ids))
        return clauses

    def statement(self) -> Select[tuple[BlogDB]]:
        """Return the SELECT for this page."""
        query = select(BlogDB).where(*self.conditions())
        sort = sort_clause(self.order_by)
        if sort is not None:
            query = query.order_by(sort)
        return query.offset(self.skip).limit(self.limit)

    def count_statement(self) -> Select[tuple[int]]:
        """Return the COUNT over the same filter, without skip/limit."""
        return select(func.count()).select_from(BlogDB).where(*self.conditions())

    def total_pages(self, count: int) -> int:
        return total_pages(count, self.limit)


def total_pages(count: int, limit: int) -> int:
    """Return `ceil(count / limit)`."""
    return ceil(count / limit)


def tag_contains(text: str) -> ColumnElement[bool]:
    """Match posts where any tag contains `text`, case-insensitively."""
    tag = func.jsonb_array_elements_text(BlogDB.tags).table_valued("value").alias("tag")
    return exists(select(1).select_from(tag).where(tag.c.value.icontains(text, autoescape=True)))


def search_condition(text: str, author_ids: tuple[UUID, ...]) -> ColumnElement[bool]:
    """Title OR author OR tag match for the search text."""
    alternatives: list[ColumnElement[bool]] = [
        BlogDB.title.icontains(text, autoescape=True),
        tag_contains(text),
    ]
    if author_ids:
        alternatives.insert(1, BlogDB.author_id.in_(author_ids))
    return or_(*alternatives)


def sort_clause(order_by: str | None) -> ColumnElement | None:
    """Descending sort for a recognized `orderBy`, else None."""
    if not order_by or order_by not in ORDERABLE_COLUMNS:
        return None
    return desc(getattr(BlogDB, ORDERABLE_COLUMNS[order_by]))


class BlogQueryBuilder:
    """Builds listing plans for the public and owner-scoped endpoints."""

    def __init__(self, authors: AuthorLookup) -> None:
        self.authors = authors

    async def build_public(self, query: BlogListQuery) -> BlogQueryPlan:
        """
        Build the plan for the public listing.

        The state filter defaults to `published`; an explicit `state`
        replaces it. A search first resolves authors whose first or last
        name contains the text. The text is matched as given, surrounding
        whitespace included.
        """
        search = query.search or None
        author_ids: tuple[UUID, ...] = ()
        if search:
            author_ids = tuple(await self.authors.find_ids_by_name(search))

        return BlogQueryPlan(
            page=query.page,
            limit=query.limit,
            state=query.state or BlogState.PUBLISHED,
            search=search,
            search_author_ids=author_ids,
            order_by=query.order_by,
        )

    @staticmethod
    def build_owned(
        author_id: UUID,
        page: int = 1,
        limit: int = settings.DEFAULT_PAGE_SIZE,
        state: str | None = None,
    ) -> BlogQueryPlan:
        """Build the plan for a user's own blogs, newest first."""
        return BlogQueryPlan(
            page=page,
            limit=limit,
            state=state,
            author_id=author_id,
            order_by="timestamp",
        )
