"""Database models for the application."""

from app.models.blog import BlogDB, BlogState
from app.models.user import UserDB

__all__ = ["BlogDB", "BlogState", "UserDB"]
