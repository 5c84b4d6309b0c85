"""Error payloads and exception handlers

Every failure leaves the API as JSON with a ``message`` key:

- request validation -> 400 {message, field}
- missing rows -> 404 {message}
- bad integration key shape -> 401 {message, valid}
- alert reopen, duplicate unique keys -> 409 {message}
- anything unhandled -> 500 {message}
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from pulseops.core.config import settings

logger = logging.getLogger(__name__)

# Leading location segments FastAPI adds to request validation errors
_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


class ValidationErrorPayload(BaseModel):
    message: str
    field: Optional[str] = None


class NotFoundPayload(BaseModel):
    message: str


class CredentialErrorPayload(BaseModel):
    message: str
    valid: bool = False


class ConflictPayload(BaseModel):
    message: str


class InternalErrorPayload(BaseModel):
    message: str


def not_found(entity: str) -> HTTPException:
    """Build the 404 raised when ``entity`` has no matching row"""
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


def conflict(message: str) -> HTTPException:
    """Build the 409 raised when a write collides with existing state"""
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)


def validation_error(message: str, field: Optional[str] = None) -> HTTPException:
    """Build a 400 carrying the same shape as a request validation failure"""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=ValidationErrorPayload(message=message, field=field).model_dump(exclude_none=True),
    )


def first_validation_error(errors: list) -> Dict[str, Any]:
    """Reduce a list of pydantic errors to the first one as {message, field}.

    Args:
        errors: ``RequestValidationError.errors()`` / ``ValidationError.errors()``

    Returns:
        payload dict, ``field`` omitted when the whole body is at fault
    """
    if not errors:
        return {"message": "Invalid request"}

    error = errors[0]
    loc = list(error.get("loc") or ())
    if loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    if error.get("type") == "json_invalid":
        # loc holds a character offset, not a field
        loc = []
    # Union members show up as segments like "dict[str,any]"
    loc = [part for part in loc if not (isinstance(part, str) and "[" in part)]
    field = ".".join(str(part) for part in loc) or None
    payload = ValidationErrorPayload(message=error.get("msg", "Invalid value"), field=field)
    return payload.model_dump(exclude_none=True)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    payload = first_validation_error(exc.errors())
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {payload}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    message = f"Internal server error: {exc}" if settings.DEBUG else "Internal server error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalErrorPayload(message=message).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
