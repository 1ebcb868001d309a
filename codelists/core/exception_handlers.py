"""Exception to HTTP response mapping for the codelists API.

Register with register_exception_handlers(app). Every error body has the
shape ``{"error", "message", "details", "request_id"}``:

    CodelistException subclasses  -> status from ERROR_CODE_STATUS
    SQLAlchemyError               -> 503 STORAGE_ERROR
    RequestValidationError        -> 422 VALIDATION_ERROR
    Starlette HTTPException       -> its own status, HTTP_ERROR
    anything else                 -> 500 INTERNAL_ERROR
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from codelists.core.config import get_settings
from codelists.domain.exceptions import CodelistException

logger = logging.getLogger(__name__)

ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "CODE_ALREADY_EXISTS": 409,
    "STRUCTURAL_VIOLATION": 409,
    "HAS_CHILDREN": 409,
    "VALIDATION_ERROR": 400,
    "SERVICE_UNAVAILABLE": 503,
}


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
) -> JSONResponse:
    body = {
        "error": error,
        "message": message,
        "details": details if details is not None else {},
        "request_id": getattr(request.state, "request_id", None),
    }
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def _hide_unless_debug(exc: Exception, public_message: str) -> str:
    return str(exc) if get_settings().debug else public_message


def _codelist_exception_handler(
    request: Request, exc: CodelistException
) -> JSONResponse:
    """Rule violations are expected traffic: log at INFO, answer with the mapped status."""
    status_code = ERROR_CODE_STATUS.get(exc.error_code, 400)
    log = logger.warning if status_code >= 500 else logger.info
    log(
        "%s %s rejected: %s (%s)",
        request.method,
        request.url.path,
        exc.error_code,
        exc.message,
    )
    return _error_response(request, status_code, exc.error_code, exc.message, exc.details)


def _storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage error on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        503,
        "STORAGE_ERROR",
        _hide_unless_debug(exc, "Storage temporarily unavailable"),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        request, 422, "VALIDATION_ERROR", "Request validation failed", exc.errors()
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(request, exc.status_code, "HTTP_ERROR", exc.detail)


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(
        request, 500, "INTERNAL_ERROR", _hide_unless_debug(exc, "Internal server error")
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler listed in the module docstring on app."""
    app.add_exception_handler(CodelistException, _codelist_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _storage_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
