# tests/fakes.py
"""In-memory repositories and model builders shared by the test suite."""

from collections.abc import Iterable
from typing import Any
from uuid import UUID, uuid4

from app.errors.database import DuplicateEntryError
from app.models import BlogDB, BlogState, UserDB
from app.repositories.blog_query import ORDERABLE_COLUMNS, BlogQueryPlan

DUMMY_HASH = "$argon2id$v=19$m=8192,t=1,p=1$c29tZXNhbHQ$somehash"

class InMemoryUserRepository:
    """Dict-backed stand-in for `UserRepository`."""

    def __init__(self) -> None:
        self.users: dict[UUID, UserDB] = {}

    def add(self, user: UserDB) -> UserDB:
        self.users[user.uuid] = user
        return user

    async def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
    ) -> UserDB:
        if await self.email_exists(email):
            raise DuplicateEntryError(detail=f"Email '{email}' already exists")
        return self.add(
            UserDB(
                email=email,
                password_hash=password_hash,
                first_name=first_name,
                last_name=last_name,
            ),
        )

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        return self.users.get(user_id)

    async def get_by_email(self, email: str) -> UserDB | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def find_ids_by_name(self, text: str) -> list[UUID]:
        needle = text.lower()
        return [
            u.uuid
            for u in self.users.values()
            if needle in u.first_name.lower() or needle in u.last_name.lower()
        ]

    async def get_authors(self, ids: Iterable[UUID]) -> dict[UUID, UserDB]:
        return {i: self.users[i] for i in set(ids) if i in self.users}


class InMemoryBlogRepository:
    """Dict-backed stand-in for `BlogRepository` that evaluates query plans in Python."""

    def __init__(self) -> None:
        self.blogs: dict[UUID, BlogDB] = {}

    async def create(self, blog: BlogDB) -> BlogDB:
        if await self.title_exists(blog.title):
            raise DuplicateEntryError(detail=f"Blog with title '{blog.title}' already exists")
        self.blogs[blog.id] = blog
        return blog

    async def get_by_id(self, blog_id: UUID) -> BlogDB | None:
        return self.blogs.get(blog_id)

    async def title_exists(self, title: str, exclude_id: UUID | None = None) -> bool:
        return any(b.title == title and b.id != exclude_id for b in self.blogs.values())

    async def save(self, blog: BlogDB) -> BlogDB:
        self.blogs[blog.id] = blog
        return blog

    async def delete(self, blog: BlogDB) -> None:
        self.blogs.pop(blog.id, None)

    async def increment_read_count(self, blog_id: UUID) -> BlogDB | None:
        blog = self.blogs.get(blog_id)
        if blog is None or blog.state != BlogState.PUBLISHED:
            return None
        blog.read_count += 1
        return blog

    async def find(self, plan: BlogQueryPlan) -> list[BlogDB]:
        return self._matching(plan)[plan.skip : plan.skip + plan.limit]

    async def count_matching(self, plan: BlogQueryPlan) -> int:
        return len(self._matching(plan))

    def _matching(self, plan: BlogQueryPlan) -> list[BlogDB]:
        matches = []
        for blog in self.blogs.values():
            if plan.state and blog.state != plan.state:
                continue
            if plan.author_id is not None and blog.author_id != plan.author_id:
                continue
            if plan.search:
                needle = plan.search.lower()
                in_title = needle in blog.title.lower()
                in_tags = any(needle in tag.lower() for tag in blog.tags)
                if not (in_title or in_tags or blog.author_id in plan.search_author_ids):
                    continue
            matches.append(blog)
        if plan.order_by in ORDERABLE_COLUMNS:
            column = ORDERABLE_COLUMNS[plan.order_by]
            matches.sort(key=lambda b: getattr(b, column), reverse=True)
        return matches


def make_user(
    first_name: str = "Test",
    last_name: str = "User",
    email: str | None = None,
) -> UserDB:
    return UserDB(
        uuid=uuid4(),
        email=email or f"{first_name.lower()}.{uuid4().hex[:6]}@example.com",
        password_hash=DUMMY_HASH,
        first_name=first_name,
        last_name=last_name,
    )


def make_blog(
    author: UserDB,
    title: str = "A blog",
    body: str = "word " * 10,
    state: str = BlogState.DRAFT,
    tags: list[str] | None = None,
    **kwargs: Any,
) -> BlogDB:
    return BlogDB(
        author_id=author.uuid,
        title=title,
        body=body,
        state=state,
        tags=tags or [],
        **kwargs,
    )

