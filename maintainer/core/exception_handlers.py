"""Failure classification and centralized exception handlers.

classify_failure() is the single mapping from a failure raised below the
boundary to an HTTP status and envelope. Endpoints call it from their own
except blocks; register_exception_handlers(app) covers what fails before an
endpoint runs (request validation, dependencies, unknown routes).
"""

import logging
from collections.abc import Mapping
from typing import TypeAlias

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from starlette.exceptions import HTTPException as StarletteHTTPException

from maintainer.domain.exceptions import (
    MaintainerException,
    RecordAlreadyDeletedException,
    RecordNotFoundException,
    StoreTimeoutException,
)
from maintainer.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)

DATA_NOT_FOUND = "Data not found."
INTERNAL_ERROR = "Internal Server Error."
INCONSISTENT_DATA = "Inconsistent data."
MODIFIED_BY_ANOTHER_USER = "The record has been modified by another user."
ALREADY_DELETED = "The record is already deleted."

# Unique index name -> (field, message) for one entity family.
UniqueKeyMap: TypeAlias = Mapping[str, tuple[str, str]]

_ERROR_CODE_STATUS: dict[str, int] = {
    "RECORD_NOT_FOUND": 404,
    "RECORD_ALREADY_DELETED": 409,
    "STORE_TIMEOUT": 408,
    "SERVICE_UNAVAILABLE": 503,
}


def envelope_response(
    envelope: ApiResponse, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    """Serialize an envelope with its own status as the HTTP status."""
    return JSONResponse(
        status_code=envelope.status,
        content=envelope.model_dump(mode="json"),
        headers=dict(headers) if headers else None,
    )


def unique_key_errors(exc: IntegrityError, unique_keys: UniqueKeyMap) -> dict[str, list[str]]:
    """Field errors for every known unique index named in the store error text."""
    text = str(exc.orig if exc.orig is not None else exc).lower()
    errors: dict[str, list[str]] = {}
    for constraint, (field, message) in unique_keys.items():
        if constraint.lower() in text:
            errors.setdefault(field, []).append(message)
    return errors


def classify_failure(
    exc: Exception, unique_keys: UniqueKeyMap, log_info: str
) -> ApiResponse:
    """Map a failure to its envelope.

    IntegrityError on a known unique index -> 400 with field errors;
    StaleDataError -> 409; RecordAlreadyDeletedException -> 409;
    RecordNotFoundException -> 404; StoreTimeoutException -> 408;
    anything else -> 500 with a generic title (details only in the log).
    """
    if isinstance(exc, IntegrityError):
        errors = unique_key_errors(exc, unique_keys)
        if errors:
            logger.error("%s - Duplicity of indexes: %s", log_info, exc.orig)
            return ApiResponse.failure(400, "Duplicity of indexes.", errors=errors)
    elif isinstance(exc, StaleDataError):
        logger.error("%s - %s", log_info, exc)
        return ApiResponse.failure(409, INCONSISTENT_DATA, MODIFIED_BY_ANOTHER_USER)
    elif isinstance(exc, RecordAlreadyDeletedException):
        logger.error("%s - %s", log_info, ALREADY_DELETED)
        return ApiResponse.failure(409, INCONSISTENT_DATA, ALREADY_DELETED)
    elif isinstance(exc, RecordNotFoundException):
        logger.error("%s - %s", log_info, DATA_NOT_FOUND)
        return ApiResponse.failure(404, DATA_NOT_FOUND)
    elif isinstance(exc, StoreTimeoutException):
        logger.error("%s - %s", log_info, exc)
        return ApiResponse.failure(408, "Timeout.")
    logger.exception("%s - Unhandled exception: %s", log_info, exc)
    return ApiResponse.failure(500, INTERNAL_ERROR)


def _field_name(loc: tuple) -> str:
    """Dotted field path without the request part ("body.role.name" -> "role.name")."""
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    if parts:
        return ".".join(parts)
    return str(loc[0]) if loc else "body"


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with one entry per invalid field."""
    envelope = ApiResponse.failure(
        400, "Data not valid.", "The data has an invalid format."
    )
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        envelope.errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    logger.error(
        "%s %s - Invalid data: %s", request.method, request.url.path, envelope.errors
    )
    return envelope_response(envelope)


def _maintainer_exception_handler(
    request: Request, exc: MaintainerException
) -> JSONResponse:
    """Envelope for domain exceptions raised outside an endpoint (e.g. in get_db)."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 500)
    logger.error("%s %s - %s", request.method, request.url.path, exc.message)
    return envelope_response(ApiResponse.failure(status, exc.message))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Envelope for Starlette HTTP exceptions (unknown route, wrong method)."""
    return envelope_response(ApiResponse.failure(exc.status_code, str(exc.detail)))


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; the exception itself only goes to the log."""
    logger.exception("Unhandled exception: %s", exc)
    return envelope_response(ApiResponse.failure(500, INTERNAL_ERROR))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: MaintainerException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(MaintainerException, _maintainer_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
