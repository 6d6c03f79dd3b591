"""Error Handlers — global exception handlers that keep the always-200 envelope contract.

Invariants:
    - LangBuddyError → {"success": false, "error": <its message>}
    - RequestValidationError → {"success": false, "error": "Invalid request data"}
    - Exception (catch-all) → {"success": false, "error": "Internal server error"}
    - Status code is 200 for all three; details go to the log only
    - The catch-all runs in Starlette's ServerErrorMiddleware, outside CORSMiddleware,
      so it attaches Access-Control-Allow-Origin itself

Design Decisions:
    - Three-layer handler: domain (LangBuddyError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from langbuddy.api.envelope import fail
from langbuddy.config import get_settings
from langbuddy.core.errors import LangBuddyError, ErrorSeverity

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"
INTERNAL_ERROR_MESSAGE = "Internal server error"

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(LangBuddyError)
    async def langbuddy_error_handler(request: Request, exc: LangBuddyError):
        """Handle all Language Buddy domain/infrastructure errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK, content=exc.to_envelope(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {_describe(exc)}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=fail(INVALID_REQUEST_MESSAGE),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=fail(INTERNAL_ERROR_MESSAGE),
            headers=_cors_headers(request),
        )


def _describe(exc: RequestValidationError) -> str:
    """Compact field-level summary for the log line."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )


def _cors_headers(request: Request) -> dict[str, str]:
    """CORS headers CORSMiddleware would have added for this request's origin."""
    origin = request.headers.get("origin")
    allowed = get_settings().cors_origins
    if not origin:
        return {}
    if "*" in allowed:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in allowed:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}
