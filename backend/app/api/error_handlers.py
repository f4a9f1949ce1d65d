"""Error Handlers — global exception handlers for the Content API.

Invariants:
    - ContentApiError → its own envelope and status (404 lookups, 503 database)
    - Unmatched path / method → rest_no_route envelope (404 / 405)
    - RequestValidationError → 400 rest_invalid_param with per-parameter messages
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (ContentApiError), routing (Starlette HTTPException),
      validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point declarative
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import ContentApiError, error_envelope

logger = logging.getLogger(__name__)

NO_ROUTE_CODE = "rest_no_route"
NO_ROUTE_MESSAGE = "No route was found matching the URL and request method."


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_content_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_content_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ContentApiError)
    async def content_error_handler(request: Request, exc: ContentApiError):
        """Handle all Content API domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "status": exc.http_status,
            "post_id": exc.context.post_id,
            "post_type": exc.context.post_type,
            "slug": exc.context.slug,
        }
        if exc.http_status >= 500:
            logger.error(f"ContentApiError: {exc.message}", extra=extra)
        else:
            logger.warning(f"ContentApiError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Map routing failures onto the REST error envelope."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            content = error_envelope(NO_ROUTE_CODE, NO_ROUTE_MESSAGE, exc.status_code)
        else:
            content = error_envelope("http_error", str(exc.detail), exc.status_code)
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code}",
            extra={"path": request.url.path, "status": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code, content=content,
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                "internal_error", "An unexpected error occurred",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the rest_invalid_param envelope, one message per parameter."""
    params = {
        str(e["loc"][-1]) if e.get("loc") else "request": e["msg"]
        for e in exc.errors()
    }
    body = error_envelope(
        "rest_invalid_param",
        f"Invalid parameter(s): {', '.join(params)}",
        status.HTTP_400_BAD_REQUEST,
    )
    body["data"]["params"] = params
    return body
