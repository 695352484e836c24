"""Base repository for database operations."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import Executable, Result, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)

type FilterValue = str | int | float | bool | UUID | datetime | None


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common persistence operations.

    This class provides a generic implementation of database operations
    that is extended by specific entity repositories. Every SQLAlchemy
    failure leaves this layer as a `DatabaseError` subclass.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        result = await self._execute(select(self.model).where(id_column == record_id))
        return result.scalar_one_or_none()

    async def save(self, record: ModelT) -> ModelT:
        """
        Persist a new or modified record.

        Args:
            record: Record to save

        Returns:
            ModelT: Refreshed record
        """
        return await self._add_and_refresh(record)

    async def delete(self, record: ModelT) -> None:
        """
        Delete a loaded record.

        Args:
            record: Record to delete
        """
        try:
            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to delete record: {e}") from e

    async def _execute(self, statement: Executable, **kwargs: Any) -> Result[Any]:
        """
        Execute a statement, translating driver failures.

        Args:
            statement: SQLAlchemy statement
            **kwargs: Extra arguments for `AsyncSession.execute`

        Returns:
            Result: Statement result

        Raises:
            DatabaseConnectionError: If the statement fails
        """
        try:
            return await self.session.execute(statement, **kwargs)
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(detail=f"Query failed: {e}") from e

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(
                detail=f"Failed to save record: {e}",
            ) from e

    async def _check_exists_by_field(
        self,
        field_name: str,
        value: FilterValue,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check if a record exists with a specific field value.

        Args:
            field_name: Name of the field to check
            value: Value to check for
            exclude_id: Optional ID to exclude from check (for updates)

        Returns:
            bool: True if record exists, False otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(1).where(field == value)

        if exclude_id is not None:
            id_column = getattr(self.model, self.id_field)
            statement = statement.where(id_column != exclude_id)

        result = await self._execute(statement.limit(1))
        return result.scalar_one_or_none() is not None
