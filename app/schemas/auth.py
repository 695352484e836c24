from uuid import UUID

from pydantic import BaseModel


class Token(BaseModel):
    """Token returned by sign-up and sign-in."""

    token: str


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    email: str
    user_id: UUID
    jti: str
    token_type: str
