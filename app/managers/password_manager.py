"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing and verification are CPU-bound, so the async entry points run them in
a thread pool to keep the event loop responsive.
"""

from asyncio import get_event_loop
from concurrent.futures import ThreadPoolExecutor
from logging import getLogger

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from app.configs import CONFIG_MAP, file_logger, settings
from app.decorators.with_retry import with_retry
from app.errors import PasswordHashingError

executor = ThreadPoolExecutor(max_workers=4)
logger = file_logger(getLogger(__name__))


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    Wraps passlib's CryptContext with argon2 as the primary scheme and
    pbkdf2_sha256 kept only to verify legacy hashes.
    """

    def __init__(self) -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        The Argon2 cost parameters come from `PASSWORD_SECURITY_LEVEL`.
        """
        self.level = settings.PASSWORD_SECURITY_LEVEL
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=CONFIG_MAP[self.level].memory_cost,
            argon2__time_cost=CONFIG_MAP[self.level].time_cost,
            argon2__parallelism=CONFIG_MAP[self.level].parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg) from None

        try:
            hashed_password = self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e
        return hashed_password

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a hashed password.

        A missing hash still runs a dummy verification so unknown accounts
        take as long to reject as wrong passwords.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """Return the shared password hasher instance."""
    return _default_hasher


@with_retry(base_delay=1, max_delay=10, exec_retry=PasswordHashingError)
async def hash_password(password: str) -> str:
    """
    Hash a password off the event loop.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password off the event loop.

    Args:
        password: The plaintext password to verify
        hashed_password: The stored hash, or None for an unknown account

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
