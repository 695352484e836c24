"""Authentication service handling sign-up and sign-in."""

from logging import getLogger

from app.configs import file_logger
from app.errors.auth import InvalidCredentialsError, UserAlreadyExistsError
from app.managers.password_manager import hash_password, verify_password
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.repositories import UserRepository
from app.schemas.auth import Token
from app.schemas.user import UserCreate, UserLogin

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for registering and authenticating users."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def signup(self, payload: UserCreate) -> Token:
        """
        Register a new user and issue a token.

        Args:
            payload: Sign-up data

        Returns:
            Token: Access token for the new user

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        email = str(payload.email).lower()
        if await self.user_repo.email_exists(email):
            raise UserAlreadyExistsError

        password_hash = await hash_password(payload.password.get_secret_value())
        user = await self.user_repo.create(
            email=email,
            password_hash=password_hash,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        logger.info(f"User {user.uuid} signed up")
        return self.create_token_for_user(user)

    async def authenticate_user(self, email: str, password: str) -> UserDB:
        """
        Authenticate a user by email and password.

        Args:
            email: User email
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_email(email.lower())
        stored_hash = user.password_hash if user else None
        if not await verify_password(password, stored_hash) or user is None:
            raise InvalidCredentialsError
        return user

    async def signin(self, payload: UserLogin) -> Token:
        """Authenticate credentials and issue a token."""
        user = await self.authenticate_user(
            str(payload.email),
            payload.password.get_secret_value(),
        )
        return self.create_token_for_user(user)

    @staticmethod
    def create_token_for_user(user: UserDB) -> Token:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            Token: Token envelope
        """
        return Token(token=create_access_token(user_id=user.uuid, email=user.email))
