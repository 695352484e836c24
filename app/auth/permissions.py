"""Ownership checks for user-owned resources."""

from typing import Protocol
from uuid import UUID

from app.errors.blog import NotAuthorizedError


class OwnedResource(Protocol):
    """Anything with an author id, such as a blog post."""

    author_id: UUID


def normalize_id(value: UUID | str | None) -> UUID | None:
    """
    Normalize an identifier to a canonical UUID.

    Args:
        value: UUID object or its string form

    Returns:
        UUID | None: Parsed UUID, or None if missing or unparsable
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def is_owner(resource: OwnedResource, principal_id: UUID | str | None) -> bool:
    """
    Check if the principal authored the resource.

    Both ids are normalized first, so a string and a UUID naming the same id
    are equal. An id that cannot be parsed never matches.

    Args:
        resource: Resource with an `author_id`
        principal_id: Id of the acting user

    Returns:
        bool: True if the principal owns the resource
    """
    author = normalize_id(resource.author_id)
    principal = normalize_id(principal_id)
    return author is not None and principal is not None and author == principal


def ensure_owner(resource: OwnedResource, principal_id: UUID | str | None) -> None:
    """
    Require that the principal owns the resource.

    Args:
        resource: Resource with an `author_id`
        principal_id: Id of the acting user

    Raises:
        NotAuthorizedError: If the principal is not the owner
    """
    if not is_owner(resource, principal_id):
        raise NotAuthorizedError
