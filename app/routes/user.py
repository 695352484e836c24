# app/routes/user.py

"""
User Routes.

Provides account registration and sign-in. Both return a bearer token used by
the authenticated blog endpoints.

Summary
-------
Endpoints include:
  - Sign up
  - Sign in

Rate Limiting
-------------
Both endpoints define explicit limits. Tiered limits apply when `X-API-Key` is
present, offering higher throughput for identified clients.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse

from app.configs import file_logger
from app.dependencies import AuthServiceDep
from app.managers.rate_limiter import limiter
from app.schemas import Token, UserCreate, UserLogin

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = file_logger(getLogger(__name__))

TOKEN_EXAMPLE = {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}


@router.post(
    "/signup",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Register a new user",
    description="Create a user account and return an access token valid for one hour.",
    responses={
        200: {"content": {"application/json": {"example": TOKEN_EXAMPLE}}},
        400: {
            "description": "Email taken or validation failed",
            "content": {"application/json": {"example": {"msg": "User already exists"}}},
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"msg": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_signup",
)
@limiter.limit(lambda key: "15/minute" if "apikey" in key else "5/minute")
async def signup(
    request: Request,
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {
                    "firstName": "John",
                    "lastName": "Doe",
                    "email": "johndoe@gmail.com",
                    "password": "Password123",
                },
            ],
        ),
    ],
    service: AuthServiceDep,
) -> Token:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    user : UserCreate
        Sign-up payload.
    service : AuthService
        Auth service dependency.

    Returns
    -------
    Token
        Access token for the new user.

    Raises
    ------
    UserAlreadyExistsError
        If the email is already registered.
    """
    return await service.signup(user)


@router.post(
    "/signin",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Sign in",
    description="Exchange email and password for an access token valid for one hour.",
    responses={
        200: {"content": {"application/json": {"example": TOKEN_EXAMPLE}}},
        400: {
            "description": "Invalid credentials",
            "content": {"application/json": {"example": {"msg": "Invalid credentials"}}},
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"msg": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_signin",
)
@limiter.limit(lambda key: "30/minute" if "apikey" in key else "10/minute")
async def signin(
    request: Request,
    credentials: UserLogin,
    service: AuthServiceDep,
) -> Token:
    """
    Sign in with email and password.

    Parameters
    ----------
    request : Request
        Current request context.
    credentials : UserLogin
        Email and password.
    service : AuthService
        Auth service dependency.

    Returns
    -------
    Token
        Access token.

    Raises
    ------
    InvalidCredentialsError
        If the email is unknown or the password is wrong.
    """
    return await service.signin(credentials)
