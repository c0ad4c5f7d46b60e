"""Error Handlers — global exception handlers producing the error envelope.

Invariants:
    - ChirpyError → its http_status with {"error": public_message}
    - RequestValidationError (malformed JSON, missing fields) → 500 generic message
    - Starlette HTTPException (unknown route, wrong method, missing static file)
      → its status with {"error": detail}
    - Exception (catch-all) → 500, never leaks internal details
    - Every error is logged with its cause before the response is built

Design Decisions:
    - Decode failures answer 500 rather than 400 so clients see the same
      status for every request the server could not process
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy.api.responses import error_response, internal_error_response
from chirpy.core.errors import ChirpyError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_chirpy_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_chirpy_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ChirpyError)
    async def chirpy_error_handler(request: Request, exc: ChirpyError):
        """Handle all Chirpy domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"ChirpyError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
                "severity": exc.severity.value,
                "category": exc.category.value,
            },
            exc_info=exc if exc.http_status >= 500 else None,
        )
        if exc.context.debug_info:
            logger.debug(f"Error context for {exc.code}: {exc.context.debug_info}")
        return error_response(exc.http_status, exc.public_message)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Undecodable request bodies are reported as internal errors."""
        logger.error(
            f"Error decoding request on {request.url.path}: {exc.errors()}",
            extra={"error_code": "DECODE_ERROR", "path": request.url.path},
        )
        return internal_error_response()


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return error_response(
            exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return internal_error_response()
