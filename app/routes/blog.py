# app/routes/blog.py

"""
Blog Routes.

Provides the public listing and single-post view, the current user's own
listing, and the owner-only create, publish, edit and delete endpoints.

Summary
-------
Endpoints include:
  - List published blogs (search, state override, sort, pagination)
  - List my blogs
  - Get a published blog by id (counts the read)
  - Create blog (as draft)
  - Publish blog
  - Edit blog
  - Delete blog

Dependencies
------------
  - `BlogOpsDeps`: Bundles the blog service and current user for authenticated operations.

Rate Limiting
-------------
All endpoints define explicit limits. Tiered limits apply when `X-API-Key` is
present, offering higher throughput for identified clients.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.configs import file_logger
from app.dependencies import (
    BlogQueryListDep,
    BlogServiceDep,
    CurrentUserDep,
    OwnBlogsQueryDep,
)
from app.managers import limiter
from app.models import BlogDB, UserDB
from app.schemas import (
    AuthorSummary,
    BlogCreate,
    BlogDetailResponse,
    BlogPage,
    BlogResponse,
    BlogUpdate,
    MessageResponse,
    OwnBlogPage,
)

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"msg": "Blog not found"}}},
}
NOT_AUTHORIZED_RESPONSE = {
    "description": "Not the author, or missing/invalid token",
    "content": {"application/json": {"example": {"msg": "Not authorized"}}},
}
RATE_LIMITED_RESPONSE = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"msg": "Rate limit exceeded"}}},
}


def to_blog_response(blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Response model with the author as a bare id.
    """
    return BlogResponse(
        id=blog.id,
        title=blog.title,
        description=blog.description,
        author=blog.author_id,
        state=blog.state,
        read_count=blog.read_count,
        reading_time=blog.reading_time,
        tags=list(blog.tags or []),
        body=blog.body,
        timestamp=blog.timestamp,
    )


def to_detail_response(blog: BlogDB, author: UserDB | None) -> BlogDetailResponse:
    """
    Convert a `BlogDB` instance and its author to `BlogDetailResponse`.

    Parameters
    ----------
    blog : BlogDB
        Database blog entity.
    author : UserDB | None
        The blog's author, if still present.

    Returns
    -------
    BlogDetailResponse
        Response model with the author's name populated.
    """
    summary = (
        AuthorSummary(id=author.uuid, first_name=author.first_name, last_name=author.last_name)
        if author
        else None
    )
    return BlogDetailResponse(
        **to_blog_response(blog).model_dump(exclude={"author"}),
        author=summary,
    )


@dataclass(frozen=True)
class BlogOpsDeps:
    """Dependencies for authenticated blog operations."""

    service: BlogServiceDep
    current_user: CurrentUserDep


BlogOpsDep = Annotated[BlogOpsDeps, Depends()]


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=BlogPage,
    summary="List published blogs",
    description=(
        "List published blogs with optional search over titles, tags and author names, "
        "a state override, sorting and pagination."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "blogs": [
                            {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "title": "Getting Started with Async Python",
                                "author": {
                                    "id": "123e4567-e89b-12d3-a456-426614174111",
                                    "firstName": "John",
                                    "lastName": "Doe",
                                },
                                "state": "published",
                                "readCount": 12,
                                "readingTime": 3,
                                "tags": ["python"],
                            },
                        ],
                        "totalPages": 1,
                        "currentPage": 1,
                    },
                },
            },
        },
        429: RATE_LIMITED_RESPONSE,
    },
    operation_id="blogs_list",
)
@router.get("/", response_class=ORJSONResponse, response_model=BlogPage, include_in_schema=False)
@limiter.limit(lambda key: "120/minute" if "apikey" in key else "60/minute")
async def list_blogs(
    request: Request,
    query: BlogQueryListDep,
    service: BlogServiceDep,
) -> BlogPage:
    """
    List published blogs.

    Parameters
    ----------
    request : Request
        Current request context.
    query : BlogListQuery
        Page, limit, search, state and orderBy.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogPage
        Page of blogs with `totalPages` and `currentPage`.
    """
    listing = await service.list_published(query)
    return BlogPage(
        blogs=[
            to_detail_response(blog, listing.authors.get(blog.author_id))
            for blog in listing.blogs
        ],
        total_pages=listing.total_pages,
        current_page=listing.current_page,
    )


@router.get(
    "/my-blogs",
    response_class=ORJSONResponse,
    response_model=OwnBlogPage,
    summary="List my blogs",
    description="List the current user's blogs, newest first, optionally filtered by state.",
    responses={401: NOT_AUTHORIZED_RESPONSE, 429: RATE_LIMITED_RESPONSE},
    operation_id="blogs_list_mine",
)
@limiter.limit(lambda key: "120/minute" if "apikey" in key else "60/minute")
async def list_my_blogs(
    request: Request,
    query: OwnBlogsQueryDep,
    deps: BlogOpsDep,
) -> OwnBlogPage:
    """
    List the current user's blogs.

    Parameters
    ----------
    request : Request
        Current request context.
    query : OwnBlogsQuery
        Page, limit and optional state.
    deps : BlogOpsDeps
        Blog service and current user.

    Returns
    -------
    OwnBlogPage
        Page of blogs with `totalPages` and `currentPage`.
    """
    listing = await deps.service.list_own(
        deps.current_user.uuid,
        page=query.page,
        limit=query.limit,
        state=query.state,
    )
    return OwnBlogPage(
        blogs=[to_blog_response(blog) for blog in listing.blogs],
        total_pages=listing.total_pages,
        current_page=listing.current_page,
    )


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogDetailResponse,
    summary="Get a published blog",
    description="Retrieve a published blog by id. Each successful retrieval counts one read.",
    responses={404: NOT_FOUND_RESPONSE, 429: RATE_LIMITED_RESPONSE},
    operation_id="blogs_get_by_id",
)
@limiter.limit(lambda key: "120/minute" if "apikey" in key else "60/minute")
async def get_blog(
    request: Request,
    blog_id: str,
    service: BlogServiceDep,
) -> BlogDetailResponse:
    """
    Get a published blog and increment its read count.

    Parameters
    ----------
    request : Request
        Current request context.
    blog_id : str
        Blog identifier.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogDetailResponse
        Blog data with the author populated.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist or is not published.
    """
    blog, author = await service.get_published(blog_id)
    return to_detail_response(blog, author)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description="Create a draft owned by the current user. Reading time is computed from the body.",
    responses={
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {
                        "msg": "Validation failed",
                        "errors": [{"field": "title", "message": "Field required"}],
                    },
                },
            },
        },
        401: NOT_AUTHORIZED_RESPONSE,
        409: {
            "description": "Duplicate title",
            "content": {
                "application/json": {
                    "example": {"msg": "Blog with title 'Hello' already exists"},
                },
            },
        },
        429: RATE_LIMITED_RESPONSE,
    },
    operation_id="blogs_create",
)
@router.post(
    "/",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    include_in_schema=False,
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def create_blog(
    request: Request,
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "Getting Started with Async Python",
                    "description": "A short tour of asyncio",
                    "tags": ["python", "asyncio"],
                    "body": "Async code lets a single thread juggle many requests...",
                },
            ],
        ),
    ],
    deps: BlogOpsDep,
) -> BlogResponse:
    """
    Create a new blog post in the draft state.

    Parameters
    ----------
    request : Request
        Current request context.
    blog : BlogCreate
        Blog input payload.
    deps : BlogOpsDeps
        Blog service and current user.

    Returns
    -------
    BlogResponse
        Created blog data.

    Raises
    ------
    DuplicateEntryError
        If the title already exists.
    """
    db_blog = await deps.service.create(deps.current_user.uuid, blog)
    return to_blog_response(db_blog)


@router.put(
    "/{blog_id}/publish",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Publish a blog",
    description="Move one of the current user's drafts to the published state.",
    responses={401: NOT_AUTHORIZED_RESPONSE, 404: NOT_FOUND_RESPONSE, 429: RATE_LIMITED_RESPONSE},
    operation_id="blogs_publish",
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def publish_blog(
    request: Request,
    blog_id: str,
    deps: BlogOpsDep,
) -> BlogResponse:
    """
    Publish a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    blog_id : str
        Blog identifier.
    deps : BlogOpsDeps
        Blog service and current user.

    Returns
    -------
    BlogResponse
        Updated blog data.
    """
    db_blog = await deps.service.publish(blog_id, deps.current_user.uuid)
    return to_blog_response(db_blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Edit a blog",
    description=(
        "Update title, description, tags or body of one of the current user's blogs. "
        "Empty values leave the field unchanged; a new body recomputes the reading time."
    ),
    responses={
        401: NOT_AUTHORIZED_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        409: {"description": "Duplicate title"},
        429: RATE_LIMITED_RESPONSE,
    },
    operation_id="blogs_update",
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def update_blog(
    request: Request,
    blog_id: str,
    blog_update: BlogUpdate,
    deps: BlogOpsDep,
) -> BlogResponse:
    """
    Edit a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    blog_id : str
        Blog identifier.
    blog_update : BlogUpdate
        Fields to change.
    deps : BlogOpsDeps
        Blog service and current user.

    Returns
    -------
    BlogResponse
        Updated blog data.
    """
    db_blog = await deps.service.edit(blog_id, deps.current_user.uuid, blog_update)
    return to_blog_response(db_blog)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a blog",
    description="Permanently delete one of the current user's blogs.",
    responses={401: NOT_AUTHORIZED_RESPONSE, 404: NOT_FOUND_RESPONSE, 429: RATE_LIMITED_RESPONSE},
    operation_id="blogs_delete",
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def delete_blog(
    request: Request,
    blog_id: str,
    deps: BlogOpsDep,
) -> MessageResponse:
    """
    Delete a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    blog_id : str
        Blog identifier.
    deps : BlogOpsDeps
        Blog service and current user.

    Returns
    -------
    MessageResponse
        `{"msg": "Blog deleted"}`.
    """
    await deps.service.delete(blog_id, deps.current_user.uuid)
    return MessageResponse(msg="Blog deleted")
