"""Blog domain errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_404_NOT_FOUND

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class BlogError(BaseAppError):
    """Base class for blog errors."""


class BlogNotFoundError(BlogError):
    """Raised when a blog does not exist or is not visible to the caller."""

    def __init__(self, detail: str = "Blog not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class NotAuthorizedError(BlogError):
    """Raised when an authenticated user acts on a blog they do not own."""

    def __init__(self, detail: str = "Not authorized") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


blog_exception_handler = create_exception_handler(logger)
