"""Custom validation and HTTP error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from app.configs import file_logger
from app.errors.base import error_content
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with cleaner response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    # Format errors for cleaner response
    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: "
        f"{formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "msg": "Validation failed",
            "errors": formatted_errors,
        },
    )


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Render framework `HTTPException`s with the `{msg: ...}` envelope."""
    http_exc = cast(HTTPException, exc)
    detail = http_exc.detail if isinstance(http_exc.detail, str) else str(http_exc.detail)
    logger.info(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")
    return ORJSONResponse(
        status_code=http_exc.status_code,
        content=error_content(http_exc.status_code, detail),
        headers=http_exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Render unexpected failures as a generic server error."""
    logger.exception(f"Unhandled error for ip: {host(request)} at endpoint {request.url.path}")
    return ORJSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content(HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__),
    )
