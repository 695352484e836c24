# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthServiceDep,
    BlogQueryListDep,
    BlogRepoDep,
    BlogServiceDep,
    CurrentUserDep,
    OwnBlogsQuery,
    OwnBlogsQueryDep,
    UserRepoDep,
    get_auth_service,
    get_blog_list_query,
    get_blog_repository,
    get_blog_service,
    get_current_user,
    get_user_repository,
    oauth2_scheme,
)

__all__ = [
    "AuthServiceDep",
    "BlogQueryListDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CurrentUserDep",
    "OwnBlogsQuery",
    "OwnBlogsQueryDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_list_query",
    "get_blog_repository",
    "get_blog_service",
    "get_current_user",
    "get_user_repository",
    "oauth2_scheme",
]
