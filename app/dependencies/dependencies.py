# app/dependencies/dependencies.py

"""Application dependencies: repositories, services, auth and query parameters."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import settings
from app.db import get_session
from app.errors.auth import InvalidTokenError, MissingTokenError
from app.managers.token_manager import decode_access_token
from app.models import UserDB
from app.repositories import BlogListQuery, BlogRepository, UserRepository
from app.schemas.blog import StateFilter
from app.services import AuthService, BlogService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/signin", auto_error=False)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """Dependency to get the AuthService."""
    return AuthService(user_repo)


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    """Dependency to get the BlogService."""
    return BlogService(blog_repo, user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Resolve the bearer token to the current user.

    Parameters
    ----------
    token : str | None
        Bearer token from the `Authorization` header.
    user_repo : UserRepository
        User repository.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    MissingTokenError
        If no bearer token was sent.
    InvalidTokenError
        If the token is invalid, expired or its user no longer exists.
    """
    if not token:
        raise MissingTokenError

    token_data = decode_access_token(token)
    if not token_data:
        raise InvalidTokenError

    user = await user_repo.get_by_id(token_data.user_id)
    if not user:
        raise InvalidTokenError

    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]


PageParam = Annotated[int, Query(ge=1, description="1-indexed page number")]
LimitParam = Annotated[
    int,
    Query(ge=1, le=settings.MAX_PAGE_SIZE, description="Maximum number of blogs per page"),
]


def get_blog_list_query(
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    search: Annotated[
        str | None,
        Query(description="Matches titles, tags and author names"),
    ] = None,
    state: Annotated[StateFilter | None, Query(description="State filter override")] = None,
    order_by: Annotated[
        str | None,
        Query(alias="orderBy", description="read_count, reading_time or timestamp"),
    ] = None,
) -> BlogListQuery:
    """
    Dependency to construct `BlogListQuery` from query parameters.

    Returns
    -------
    BlogListQuery
        Aggregated query parameters object.
    """
    return BlogListQuery(
        page=page,
        limit=limit,
        search=search,
        state=state,
        order_by=order_by,
    )


@dataclass(frozen=True)
class OwnBlogsQuery:
    """
    Query container for the current user's blog listing.

    Parameters
    ----------
    page : int
        1-indexed page number.
    limit : int
        Maximum number of records to return.
    state : StateFilter | None
        Optional state filter.
    """

    page: int = 1
    limit: int = settings.DEFAULT_PAGE_SIZE
    state: StateFilter | None = None


def get_own_blogs_query(
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    state: Annotated[StateFilter | None, Query(description="Optional state filter")] = None,
) -> OwnBlogsQuery:
    return OwnBlogsQuery(page=page, limit=limit, state=state)


BlogQueryListDep = Annotated[BlogListQuery, Depends(get_blog_list_query)]
OwnBlogsQueryDep = Annotated[OwnBlogsQuery, Depends(get_own_blogs_query)]
