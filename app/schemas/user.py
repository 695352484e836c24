"""
User schemas for registration and sign-in.

This module defines the request bodies used by the authentication routes.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr


class UserCreate(BaseModel):
    """Sign-up request body."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    first_name: str = Field(
        ...,
        alias="firstName",
        min_length=1,
        max_length=100,
        description="User first name",
        examples=["John"],
    )
    last_name: str = Field(
        ...,
        alias="lastName",
        min_length=1,
        max_length=100,
        description="User last name",
        examples=["Doe"],
    )
    email: EmailStr = Field(
        ...,
        description="Email address",
        examples=["johndoe@gmail.com"],
    )
    password: SecretStr = Field(
        ...,
        min_length=6,
        description="Password",
        examples=["Password123"],
    )


class UserLogin(BaseModel):
    """Sign-in request body."""

    model_config = ConfigDict(frozen=True)

    email: EmailStr
    password: SecretStr
