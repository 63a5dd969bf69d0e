"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of application exceptions into
HTTP responses. Every failure body has the shape
``{"error": "...", "details": "..."}``.
"""

import inspect
from functools import wraps
from typing import Callable, Optional
import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from constants import FieldLimits, HTTPStatus, Messages
from exceptions import (
    ApplicationError,
    ConflictError,
    DatabaseError,
    InvalidIdentifierError,
    NotFoundError,
    RecordNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Exception carrying a ready-made error response.

    Raised by endpoints (usually through handle_api_errors) and rendered by
    api_error_handler.
    """

    def __init__(self, status_code: int, error: str, details: Optional[str] = None):
        self.status_code = status_code
        self.error = error
        self.details = details
        super().__init__(error)

    def to_body(self) -> dict:
        body = {"error": self.error}
        if self.details:
            body["details"] = self.details
        return body


def parse_id(raw_value: str) -> int:
    """
    Parse a path parameter as an unsigned 32-bit identifier.

    Args:
        raw_value: Raw path segment

    Returns:
        Parsed identifier

    Raises:
        InvalidIdentifierError: If the value is not a decimal integer in range
    """
    if not raw_value.isascii() or not raw_value.isdigit():
        raise InvalidIdentifierError(raw_value)
    value = int(raw_value)
    if value > FieldLimits.ID_MAX:
        raise InvalidIdentifierError(raw_value)
    return value


def _translate(
    exc: Exception,
    operation_name: str,
    error_message: str,
    not_found_status: int,
    not_found_message: Optional[str],
) -> ApiError:
    """Map an exception raised by an endpoint to an ApiError."""
    if isinstance(exc, InvalidIdentifierError):
        logger.warning(f"{operation_name} - Invalid identifier: {exc.message}")
        return ApiError(HTTPStatus.BAD_REQUEST, Messages.INVALID_ID, exc.message)
    if isinstance(exc, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {exc.message}")
        return ApiError(HTTPStatus.BAD_REQUEST, error_message, exc.message)
    if isinstance(exc, (NotFoundError, RecordNotFoundError)):
        logger.warning(f"{operation_name} - Not found: {exc.message}")
        return ApiError(not_found_status, not_found_message or error_message, exc.message)
    if isinstance(exc, ConflictError):
        logger.warning(f"{operation_name} - Conflict: {exc.message}")
        return ApiError(HTTPStatus.CONFLICT, error_message, exc.message)
    if isinstance(exc, DatabaseError):
        logger.error(f"{operation_name} - Database error: {exc.message}", exc_info=True)
        return ApiError(HTTPStatus.INTERNAL_SERVER_ERROR, error_message, Messages.STORAGE_FAILURE_DETAIL)
    if isinstance(exc, ApplicationError):
        logger.error(f"{operation_name} - Application error: {exc.message}", exc_info=True)
        return ApiError(HTTPStatus.INTERNAL_SERVER_ERROR, error_message, exc.message)

    logger.error(f"{operation_name} - Unexpected error: {exc}", exc_info=True)
    return ApiError(HTTPStatus.INTERNAL_SERVER_ERROR, error_message)


def handle_api_errors(
    error_message: str,
    not_found_status: int = HTTPStatus.NOT_FOUND,
    not_found_message: Optional[str] = None,
):
    """
    Decorator to handle common API errors consistently across endpoints.

    Mapping:
        InvalidIdentifierError          -> 400 "ID inválido"
        ValidationError                 -> 400
        NotFoundError / RecordNotFound  -> not_found_status (404 by default)
        ConflictError                   -> 409
        DatabaseError                   -> 500, generic details
        anything else                   -> 500

    Args:
        error_message: ``error`` string of the failure body
        not_found_status: Status for not-found errors. Update endpoints pass
            400 here, matching the established contract for PUT.
        not_found_message: ``error`` string for not-found errors, if different

    Example:
        @router.delete("/areas/{area_id}")
        @handle_api_errors(Messages.AREA_DELETE_FAILED)
        def delete_area(area_id: str, ...):
            ...
    """
    def decorator(func: Callable):
        name = func.__name__

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except ApiError:
                raise
            except Exception as e:
                raise _translate(e, name, error_message, not_found_status, not_found_message) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ApiError:
                raise
            except Exception as e:
                raise _translate(e, name, error_message, not_found_status, not_found_message) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError as a JSON error body."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed or incomplete request bodies as 400 instead of
    FastAPI's default 422. The endpoint never runs in this case.
    """
    details = _describe_validation_errors(exc)
    logger.warning(f"{request.method} {request.url.path} - Invalid payload: {details}")
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content=jsonable_encoder({"error": Messages.INVALID_DATA, "details": details}),
    )
