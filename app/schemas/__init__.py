from app.schemas.auth import Token, TokenData
from app.schemas.blog import (
    AuthorSummary,
    BlogCreate,
    BlogDetailResponse,
    BlogPage,
    BlogResponse,
    BlogUpdate,
    MessageResponse,
    OwnBlogPage,
    StateFilter,
)
from app.schemas.health import HealthCheckResponse
from app.schemas.user import UserCreate, UserLogin

__all__ = [
    "AuthorSummary",
    "BlogCreate",
    "BlogDetailResponse",
    "BlogPage",
    "BlogResponse",
    "BlogUpdate",
    "HealthCheckResponse",
    "MessageResponse",
    "OwnBlogPage",
    "StateFilter",
    "Token",
    "TokenData",
    "UserCreate",
    "UserLogin",
]
