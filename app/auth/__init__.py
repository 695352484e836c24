"""Authorization helpers."""

from app.auth.permissions import OwnedResource, ensure_owner, is_owner, normalize_id

__all__ = ["OwnedResource", "ensure_owner", "is_owner", "normalize_id"]
