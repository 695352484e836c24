"""Blog repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import update

from app.configs import file_logger
from app.errors.database import DuplicateEntryError
from app.models.blog import BlogDB, BlogState
from app.repositories.base import BaseRepository
from app.repositories.blog_query import BlogQueryPlan

logger = file_logger(getLogger(__name__))


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    This class implements the repository pattern for Blog entities,
    providing lookups, paginated listings and the atomic read counter.
    """

    model = BlogDB

    async def create(self, blog: BlogDB) -> BlogDB:
        """
        Insert a new blog post.

        Args:
            blog: Blog to insert

        Returns:
            BlogDB: Created blog database model

        Raises:
            DuplicateEntryError: If the title already exists
            DatabaseError: For other database errors
        """
        try:
            return await self._add_and_refresh(blog)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(
                detail=f"Blog with title '{blog.title}' already exists",
            ) from e

    async def title_exists(self, title: str, exclude_id: UUID | None = None) -> bool:
        """
        Check whether a title is already taken.

        Args:
            title: Title to check
            exclude_id: Blog to ignore (the one being edited)

        Returns:
            bool: True if another blog uses the title
        """
        return await self._check_exists_by_field("title", title, exclude_id)

    async def increment_read_count(self, blog_id: UUID) -> BlogDB | None:
        """
        Atomically add one read to a published blog.

        The increment and the published check happen in a single
        `UPDATE ... RETURNING`, so concurrent reads are never lost.

        Args:
            blog_id: Blog UUID

        Returns:
            BlogDB | None: The updated blog, or None when no published blog has this id
        """
        statement = (
            update(BlogDB)
            .where(BlogDB.id == blog_id, BlogDB.state == BlogState.PUBLISHED)
            .values(read_count=BlogDB.read_count + 1)
            .returning(BlogDB)
            .execution_options(populate_existing=True)
        )
        result = await self._execute(statement)
        return result.scalar_one_or_none()

    async def find(self, plan: BlogQueryPlan) -> list[BlogDB]:
        """
        Fetch one page of blogs.

        Args:
            plan: Filter, sort and pagination

        Returns:
            list[BlogDB]: Blogs on the requested page
        """
        result = await self._execute(plan.statement())
        return list(result.scalars().all())

    async def count_matching(self, plan: BlogQueryPlan) -> int:
        """
        Count all blogs matching the plan's filter.

        Args:
            plan: Filter, sort and pagination (sort and pagination are ignored)

        Returns:
            int: Number of matching blogs
        """
        result = await self._execute(plan.count_statement())
        return result.scalar_one()
