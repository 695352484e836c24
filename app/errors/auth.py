"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class MissingTokenError(UserAuthenticationError):
    """Raised when a protected endpoint is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__("No token, authorization denied", HTTP_401_UNAUTHORIZED)


class InvalidTokenError(UserAuthenticationError):
    """Raised when the bearer token cannot be decoded or its user is gone."""

    def __init__(self) -> None:
        super().__init__("Token is not valid", HTTP_401_UNAUTHORIZED)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when sign-in credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials", HTTP_400_BAD_REQUEST)


class UserAlreadyExistsError(UserAuthenticationError):
    """Raised when signing up with an email that is already registered."""

    def __init__(self) -> None:
        super().__init__("User already exists", HTTP_400_BAD_REQUEST)


auth_exception_handler = create_exception_handler(logger)
