"""Repository layer for database operations."""

from app.repositories.base import BaseRepository
from app.repositories.blog import BlogRepository
from app.repositories.blog_query import BlogListQuery, BlogQueryBuilder, BlogQueryPlan
from app.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "BlogListQuery",
    "BlogQueryBuilder",
    "BlogQueryPlan",
    "BlogRepository",
    "UserRepository",
]
