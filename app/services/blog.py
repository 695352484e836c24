"""
Blog service: listing, public reads and the draft to published lifecycle.

Lifecycle rules are plain functions over `BlogDB` so they can be exercised
without a database; `BlogService` wires them to the repositories together
with the ownership check.
"""

from dataclasses import dataclass
from logging import getLogger
from uuid import UUID

from app.auth.permissions import ensure_owner, normalize_id
from app.configs import file_logger
from app.errors.blog import BlogNotFoundError
from app.errors.database import DuplicateEntryError
from app.models import BlogDB, BlogState, UserDB
from app.repositories import BlogListQuery, BlogQueryBuilder, BlogRepository, UserRepository
from app.repositories.blog_query import BlogQueryPlan
from app.schemas.blog import BlogCreate, BlogUpdate
from app.utils.reading_time import calculate_reading_time

logger = file_logger(getLogger(__name__))


def new_draft(author_id: UUID, payload: BlogCreate) -> BlogDB:
    """Build a new draft owned by `author_id` with its reading time computed."""
    return BlogDB(
        author_id=author_id,
        title=payload.title,
        description=payload.description,
        tags=list(payload.tags),
        body=payload.body,
        state=BlogState.DRAFT,
        read_count=0,
        reading_time=calculate_reading_time(payload.body),
    )


def mark_published(blog: BlogDB) -> BlogDB:
    """Move a blog to `published`. Publishing twice is a no-op."""
    blog.state = BlogState.PUBLISHED
    return blog


def apply_changes(blog: BlogDB, changes: BlogUpdate) -> BlogDB:
    """
    Apply an edit to a blog.

    Only truthy values are applied; an empty string or empty list leaves the
    stored value as it is. A new body recomputes the reading time.
    """
    if changes.title:
        blog.title = changes.title
    if changes.description:
        blog.description = changes.description
    if changes.tags:
        blog.tags = list(changes.tags)
    if changes.body:
        blog.body = changes.body
        blog.reading_time = calculate_reading_time(changes.body)
    return blog


@dataclass(frozen=True)
class BlogListing:
    """One page of blogs with the authors needed to render them."""

    blogs: list[BlogDB]
    total_pages: int
    current_page: int
    authors: dict[UUID, UserDB]


class BlogService:
    """Service orchestrating blog reads and owner-only mutations."""

    def __init__(self, blog_repo: BlogRepository, user_repo: UserRepository) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository
            user_repo: User repository, used for author lookups
        """
        self.blog_repo = blog_repo
        self.user_repo = user_repo
        self.query_builder = BlogQueryBuilder(user_repo)

    async def _page(self, plan: BlogQueryPlan) -> tuple[list[BlogDB], int]:
        blogs = await self.blog_repo.find(plan)
        count = await self.blog_repo.count_matching(plan)
        return blogs, plan.total_pages(count)

    async def list_published(self, query: BlogListQuery) -> BlogListing:
        """
        List blogs for the public listing, with authors populated.

        Args:
            query: Listing parameters

        Returns:
            BlogListing: Requested page
        """
        plan = await self.query_builder.build_public(query)
        blogs, total_pages = await self._page(plan)
        authors = await self.user_repo.get_authors(blog.author_id for blog in blogs)
        return BlogListing(
            blogs=blogs,
            total_pages=total_pages,
            current_page=plan.page,
            authors=authors,
        )

    async def list_own(
        self,
        author_id: UUID,
        page: int,
        limit: int,
        state: str | None = None,
    ) -> BlogListing:
        """
        List the principal's own blogs, newest first.

        Args:
            author_id: Id of the principal
            page: 1-indexed page number
            limit: Page size
            state: Optional state filter

        Returns:
            BlogListing: Requested page, without author population
        """
        plan = self.query_builder.build_owned(author_id, page=page, limit=limit, state=state)
        blogs, total_pages = await self._page(plan)
        return BlogListing(
            blogs=blogs,
            total_pages=total_pages,
            current_page=plan.page,
            authors={},
        )

    async def get_published(self, blog_id: UUID | str) -> tuple[BlogDB, UserDB | None]:
        """
        Retrieve a published blog for public view, counting the read.

        Args:
            blog_id: Blog id

        Returns:
            tuple[BlogDB, UserDB | None]: The blog and its author

        Raises:
            BlogNotFoundError: If the blog is missing or still a draft
        """
        parsed_id = normalize_id(blog_id)
        if parsed_id is None:
            raise BlogNotFoundError

        blog = await self.blog_repo.increment_read_count(parsed_id)
        if blog is None:
            raise BlogNotFoundError

        author = await self.user_repo.get_by_id(blog.author_id)
        return blog, author

    async def create(self, author_id: UUID, payload: BlogCreate) -> BlogDB:
        """
        Create a draft owned by the principal.

        Raises:
            DuplicateEntryError: If the title is already taken
        """
        if await self.blog_repo.title_exists(payload.title):
            raise DuplicateEntryError(detail=f"Blog with title '{payload.title}' already exists")

        blog = await self.blog_repo.create(new_draft(author_id, payload))
        logger.info(f"Blog {blog.id} created by {author_id}")
        return blog

    async def publish(self, blog_id: UUID | str, principal_id: UUID) -> BlogDB:
        """
        Publish one of the principal's blogs.

        Raises:
            BlogNotFoundError: If the blog does not exist
            NotAuthorizedError: If the principal is not the author
        """
        blog = await self._get_owned(blog_id, principal_id)
        return await self.blog_repo.save(mark_published(blog))

    async def edit(self, blog_id: UUID | str, principal_id: UUID, changes: BlogUpdate) -> BlogDB:
        """
        Edit one of the principal's blogs.

        Raises:
            BlogNotFoundError: If the blog does not exist
            NotAuthorizedError: If the principal is not the author
            DuplicateEntryError: If the new title belongs to another blog
        """
        blog = await self._get_owned(blog_id, principal_id)
        if (
            changes.title
            and changes.title != blog.title
            and await self.blog_repo.title_exists(changes.title, exclude_id=blog.id)
        ):
            raise DuplicateEntryError(detail=f"Blog with title '{changes.title}' already exists")

        return await self.blog_repo.save(apply_changes(blog, changes))

    async def delete(self, blog_id: UUID | str, principal_id: UUID) -> None:
        """
        Permanently delete one of the principal's blogs.

        Raises:
            BlogNotFoundError: If the blog does not exist
            NotAuthorizedError: If the principal is not the author
        """
        blog = await self._get_owned(blog_id, principal_id)
        await self.blog_repo.delete(blog)
        logger.info(f"Blog {blog.id} deleted by {principal_id}")

    async def _get_owned(self, blog_id: UUID | str, principal_id: UUID) -> BlogDB:
        parsed_id = normalize_id(blog_id)
        blog = await self.blog_repo.get_by_id(parsed_id) if parsed_id else None
        if blog is None:
            raise BlogNotFoundError
        ensure_owner(blog, principal_id)
        return blog
