"""User repository for database operations."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import or_, select

from app.errors.database import DuplicateEntryError
from app.models.user import UserDB
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    providing account lookups and the author lookups used by blog listings.
    """

    model = UserDB
    id_field = "uuid"

    async def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
    ) -> UserDB:
        """
        Create a new user in the database.

        Args:
            email: Email address (unique)
            password_hash: Already hashed password
            first_name: First name
            last_name: Last name

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the email already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail=f"Email '{email}' already exists") from e

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self._execute(select(UserDB).where(UserDB.email == email))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check if an email is already registered."""
        return await self._check_exists_by_field("email", email)

    async def find_ids_by_name(self, text: str) -> list[UUID]:
        """
        Find users whose first or last name contains `text`.

        Matching is case-insensitive and literal (LIKE wildcards are escaped).

        Args:
            text: Substring to look for

        Returns:
            list[UUID]: Matching user ids
        """
        statement = select(UserDB.uuid).where(
            or_(
                UserDB.first_name.icontains(text, autoescape=True),
                UserDB.last_name.icontains(text, autoescape=True),
            ),
        )
        result = await self._execute(statement)
        return list(result.scalars().all())

    async def get_authors(self, ids: Iterable[UUID]) -> dict[UUID, UserDB]:
        """
        Load several users at once, keyed by id.

        Args:
            ids: User ids (duplicates are fine)

        Returns:
            dict[UUID, UserDB]: Users found, keyed by their id
        """
        unique_ids = set(ids)
        if not unique_ids:
            return {}
        result = await self._execute(select(UserDB).where(UserDB.uuid.in_(unique_ids)))
        return {user.uuid: user for user in result.scalars().all()}
