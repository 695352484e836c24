from app.services.auth import AuthService
from app.services.blog import (
    BlogListing,
    BlogService,
    apply_changes,
    mark_published,
    new_draft,
)

__all__ = [
    "AuthService",
    "BlogListing",
    "BlogService",
    "apply_changes",
    "mark_published",
    "new_draft",
]
