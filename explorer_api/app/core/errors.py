"""
Error taxonomy and the JSON error envelope.

Every error leaves the API as ``{"error": <message>}`` with a 4xx or
5xx status.  Services raise the exceptions defined here; request
validation failures raised by FastAPI and routing misses raised by
Starlette are translated by the handlers registered in
``register_exception_handlers``.  Anything else that escapes a
route becomes a logged 500 ``internal server error``.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ExplorerError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ExplorerError):
    """A required field is missing or a value is not acceptable."""

    status_code = status.HTTP_400_BAD_REQUEST

    @classmethod
    def from_errors(cls, errors: List[Dict[str, Any]]) -> "ValidationError":
        """Build the error for a list of pydantic error dicts."""
        return cls(describe_validation_errors(errors))


class NotFoundError(ExplorerError):
    """The requested entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(ExplorerError):
    """The backing document cannot be read or written."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _join_fields(names: List[str]) -> str:
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " and " + names[-1]


def _is_missing(error: Dict[str, Any]) -> bool:
    # Empty strings and nulls count as absent, like an unset field.
    if error.get("type") == "missing":
        return True
    return error.get("input", object()) in (None, "")


def describe_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """Build a single human readable message from pydantic errors.

    Missing body fields are grouped (``"title and url required"``),
    a missing query parameter is reported as ``"q parameter required"``
    and any other problem as ``"<field>: <reason>"``.
    """
    missing_body: List[str] = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if error.get("type") == "json_invalid":
            return "invalid JSON body"
        if loc == ("body",) and _is_missing(error):
            return "request body required"
        if not _is_missing(error) or len(loc) < 2:
            continue
        if loc[0] == "query":
            return f"{loc[-1]} parameter required"
        name = str(loc[-1])
        if name not in missing_body:
            missing_body.append(name)
    if missing_body:
        return f"{_join_fields(missing_body)} required"
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
    return f"{field}: {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach handlers rendering every error in the JSON envelope."""

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return error_response(exc.status_code, "storage unavailable")

    @app.exception_handler(ExplorerError)
    async def explorer_error_handler(request: Request, exc: ExplorerError) -> JSONResponse:
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = ValidationError.from_errors(list(exc.errors()))
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, error.message)
        return error_response(error.status_code, error.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods share the generic reply.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return error_response(status.HTTP_404_NOT_FOUND, "not found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")
