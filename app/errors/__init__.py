from app.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserAlreadyExistsError,
    UserAuthenticationError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler, error_content
from app.errors.blog import (
    BlogError,
    BlogNotFoundError,
    NotAuthorizedError,
    blog_exception_handler,
)
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    database_exception_handler,
)
from app.errors.password_hasher import PasswordHashingError, password_hashing_exception_handler
from app.errors.validation import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "BlogError",
    "BlogNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotAuthorizedError",
    "PasswordHashingError",
    "UserAlreadyExistsError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "blog_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "error_content",
    "http_exception_handler",
    "password_hashing_exception_handler",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
