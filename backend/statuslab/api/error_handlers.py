"""Error Handlers — global exception handlers for the StatusLab API.

Invariants:
    - StatusLabError → structured JSON with message, error code, severity
    - RequestValidationError → 400 with field-level error details
    - HTTPException (router 404/405) → {"message": detail}, original headers kept
    - SimulatedServerError → generic 500, answered inside the middleware stack
      so CORS headers are still applied
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (StatusLabError), validation (Pydantic),
      framework (HTTPException), faults (SimulatedServerError + catch-all)
    - Binding failures answer 400, not FastAPI's default 422: 422 is reserved
      for the unprocessable endpoint's own outcome
    - Handlers for Exception run in Starlette's ServerErrorMiddleware, outside
      CORSMiddleware: truly unexpected 500s carry no CORS headers. The simulated
      fault is registered by its own class so it is handled by ExceptionMiddleware,
      inside CORS, like every other outcome
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from statuslab.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    SimulatedServerError,
    StatusLabError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_statuslab_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_exception_handler(app)
    _register_simulated_fault_handler(app)
    _register_generic_error_handler(app)


def _register_statuslab_error_handler(app: FastAPI) -> None:
    """Register StatusLab domain error handler."""

    @app.exception_handler(StatusLabError)
    async def statuslab_error_handler(request: Request, exc: StatusLabError):
        """Handle all StatusLab domain errors."""
        exc.context.path = exc.context.path or request.url.path
        logger.warning(
            f"StatusLabError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "status_code": 400},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register router-level HTTP error handler (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Same message envelope as every other response; Allow header kept on 405."""
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.status_code,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=exc.headers,
        )


def _register_simulated_fault_handler(app: FastAPI) -> None:
    """Register the handler for the deliberate internalerror fault."""

    @app.exception_handler(SimulatedServerError)
    async def simulated_fault_handler(
        request: Request, exc: SimulatedServerError,
    ):
        """Deliberate fault — same generic 500 as the catch-all."""
        logger.error(
            f"Simulated fault on {request.url.path}: {exc.message}",
            extra={"path": request.url.path, "status_code": 500},
        )
        return _internal_error_response()


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "status_code": 500},
        )
        return _internal_error_response()


def _internal_error_response() -> JSONResponse:
    """Generic 500 body shared by the fault handlers."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": INTERNAL_ERROR_MESSAGE,
            "error": {
                "code": "INTERNAL_ERROR",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "message": "Bad Request: invalid request data.",
        "error": {
            "code": "VALIDATION_ERROR",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
