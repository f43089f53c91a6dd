"""
Error types and exception handlers.

The API knows two failure kinds: a request that lacks required data
(``ValidationError``, HTTP 400) and a request that names a record the
target collection does not hold (``NotFoundError``, HTTP 404).  Every
failure is rendered as ``{"message": ...}`` with the matching status
code, including the validation errors FastAPI raises while parsing
request bodies and the 404/405 responses for unknown routes.
"""

import logging
from typing import Any, Dict, Iterable, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Not-found message per collection, keyed by the resource path segment.
NOT_FOUND_MESSAGES = {
    "people": "Person not found",
    "projects": "Project not found",
    "tasks": "Task not found",
}

# Pydantic error types that mean a required value is absent or falsy.
MISSING_ERROR_TYPES = {"missing", "string_too_short", "value_error"}


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Required request data is missing, empty or falsy."""

    status_code = status.HTTP_400_BAD_REQUEST

    @classmethod
    def missing(cls, fields: Iterable[str]) -> "ValidationError":
        names = ", ".join(fields)
        if not names:
            return cls("Missing request data")
        return cls(f"Missing required fields: {names}")

    @classmethod
    def from_errors(cls, errors: Sequence[Dict[str, Any]]) -> "ValidationError":
        """Describe pydantic errors as missing and/or invalid body fields."""
        if any(error.get("type") == "json_invalid" for error in errors):
            return cls("Malformed request body")
        missing: List[str] = []
        invalid: List[str] = []
        for error in errors:
            # Integer parts are JSON offsets or list indexes, not field names.
            loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
            if not loc:
                continue
            absent = error.get("type") in MISSING_ERROR_TYPES or error.get("input") is None
            target = missing if absent else invalid
            if loc[0] not in missing + invalid:
                target.append(loc[0])
        if not missing and not invalid:
            return cls.missing(())
        parts = []
        if missing:
            parts.append(f"Missing required fields: {', '.join(missing)}")
        if invalid:
            parts.append(f"Invalid fields: {', '.join(invalid)}")
        return cls("; ".join(parts))


class NotFoundError(ApiError):
    """No record with the requested id exists in the collection."""

    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_path(cls, path: str) -> "NotFoundError":
        """Error naming the collection that ``path`` addresses."""
        for segment in path.strip("/").split("/"):
            if segment in NOT_FOUND_MESSAGES:
                return cls(NOT_FOUND_MESSAGES[segment])
        return cls("Record not found")


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return _message(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # A path id that is not an integer can never match a record.
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in exc.errors()):
        return await api_error_handler(request, NotFoundError.for_path(request.url.path))
    return await api_error_handler(request, ValidationError.from_errors(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _message(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
