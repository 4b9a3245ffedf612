"""Global exception handlers producing the standard error envelope.

Invariants:
    - HTTPException -> envelope with the exception's status and detail
    - RequestValidationError -> 400 with field-level ``errors``
    - Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ats.crud.responses import send_error
from ats.crud.validation import FieldError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Wrap framework HTTP errors (404 route, 405 method) in the envelope."""
        logger.info(
            "%s %s -> %s",
            request.method,
            request.url.path,
            exc.status_code,
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return send_error(str(exc.detail), exc.status_code)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request parsing errors (malformed JSON, bad path params)."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        errors = [
            FieldError(
                field=".".join(str(loc) for loc in err["loc"]),
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return send_error("Validation failed", status.HTTP_400_BAD_REQUEST, errors)


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: log the traceback, return a bare 500."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return send_error("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)
