"""Error Handlers — the responder that turns failures into wire responses.

Invariants:
    - ApiError → status from the kind table, body {"error": message}
    - RequestValidationError (path parsing) → 400 {"error": "Invalid URL: ..."}
    - HTTPException (unknown route, wrong method) → same status, {"error": detail}
    - Exception (catch-all) → 500 {"error": "internal server error"}, never leaks details
    - Every error body has exactly one field: `error`

Design Decisions:
    - Path parsing failures are answered with 400, not FastAPI's default 422,
      so an unparsable id looks the same as any other bad URL
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.core.errors import INTERNAL_ERROR_MESSAGE, ApiError, describe_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def error_body(message: str) -> dict:
    return {"error": message}


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Handle errors raised by route handlers."""
        http_status, message = describe_error(exc)
        log = logger.error if http_status >= 500 else logger.warning
        log(
            f"ApiError: {message}",
            extra={
                "error_code": exc.kind.value,
                "path": request.url.path,
                "method": request.method,
                "status_code": http_status,
            },
        )
        return JSONResponse(status_code=http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request parsing errors with a single-field body."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(_build_validation_message(exc)),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle routing errors (404 unknown path, 405 wrong method)."""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(INTERNAL_ERROR_MESSAGE),
        )


def _build_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid URL"
    first = errors[0]
    field = ".".join(str(loc) for loc in first.get("loc", ()) if loc != "path")
    reason = first.get("msg", "invalid value")
    if field:
        return f"Invalid URL: {field}: {reason}"
    return f"Invalid URL: {reason}"
