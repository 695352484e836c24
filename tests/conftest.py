# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must be set before the app (and its settings) is imported anywhere
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_TO_FILE"] = "false"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.dependencies import get_blog_repository, get_user_repository  # noqa: E402
from app.main import app  # noqa: E402
from app.managers.rate_limiter import limiter  # noqa: E402
from app.managers.token_manager import create_access_token  # noqa: E402
from app.models import BlogDB, UserDB  # noqa: E402
from tests.fakes import (  # noqa: E402
    InMemoryBlogRepository,
    InMemoryUserRepository,
    make_blog,
    make_user,
)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def blog_repo() -> InMemoryBlogRepository:
    return InMemoryBlogRepository()


@pytest.fixture
def sample_user(user_repo: InMemoryUserRepository) -> UserDB:
    """A registered user who owns blogs in most tests."""
    return user_repo.add(make_user("Ada", "Lovelace", "ada@example.com"))


@pytest.fixture
def other_user(user_repo: InMemoryUserRepository) -> UserDB:
    """A second registered user, never the owner."""
    return user_repo.add(make_user("Grace", "Hopper", "grace@example.com"))


@pytest.fixture
def auth_headers(sample_user: UserDB) -> dict[str, str]:
    """Bearer headers for `sample_user`."""
    token = create_access_token(user_id=sample_user.uuid, email=sample_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user: UserDB) -> dict[str, str]:
    """Bearer headers for `other_user`."""
    token = create_access_token(user_id=other_user.uuid, email=other_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(
    blog_repo: InMemoryBlogRepository,
    user_repo: InMemoryUserRepository,
) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client wired to the in-memory repositories."""
    limiter.enabled = False
    app.dependency_overrides[get_blog_repository] = lambda: blog_repo
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides = {}
    limiter.enabled = True


@pytest.fixture
def user_factory(user_repo: InMemoryUserRepository) -> Callable[..., UserDB]:
    """Register a user in the in-memory repository."""

    def _make(
        first_name: str = "Test",
        last_name: str = "User",
        email: str | None = None,
    ) -> UserDB:
        return user_repo.add(make_user(first_name, last_name, email))

    return _make


@pytest.fixture
def blog_factory(blog_repo: InMemoryBlogRepository) -> Callable[..., BlogDB]:
    """Store a blog in the in-memory repository."""

    def _make(author: UserDB, **kwargs: Any) -> BlogDB:
        blog = make_blog(author, **kwargs)
        blog_repo.blogs[blog.id] = blog
        return blog

    return _make
