"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - Every error response has the shape {"error": str}
    - CatalogError → its own http_status and message
    - RequestValidationError → 400 with field-level message
    - Unmatched path or method (Starlette 404/405) → 404 "Route not found"
    - Exception (catch-all) → 500 "Internal server error", never leaks internals
    - The catch-all runs outside CORSMiddleware, so it attaches the CORS headers itself

Design Decisions:
    - Four-layer handler: domain (CatalogError), validation (Pydantic), routing (Starlette),
      catch-all (Exception)
    - Registered from main.py via register_error_handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from artist_catalog.api.cors import cors_headers
from artist_catalog.core.errors import (
    ArtistValidationError, CatalogError, ErrorSeverity, RouteNotFoundError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _log_catalog_error(request: Request, exc: CatalogError) -> None:
    level = (
        logging.ERROR
        if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
        else logging.WARNING
    )
    logger.log(
        level,
        f"CatalogError: {exc.message}",
        extra={
            **exc.log_extra(), "method": request.method, "path": request.url.path,
        },
    )


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        _log_catalog_error(request, exc)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        errors = exc.errors()
        validation_error = ArtistValidationError(
            format_validation_errors(errors),
            fields=[_field_name(e) for e in errors],
        )
        _log_catalog_error(request, validation_error)
        return JSONResponse(
            status_code=validation_error.http_status,
            content=validation_error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register Starlette HTTP error handler (unmatched routes)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            route_error = RouteNotFoundError(request.method, request.url.path)
            _log_catalog_error(request, route_error)
            return JSONResponse(
                status_code=route_error.http_status,
                content=route_error.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
            headers=cors_headers(),
        )


def format_validation_errors(errors) -> str:
    """Collapse Pydantic error entries into one readable message.

    The leading "body"/"query"/"path" location segment is dropped:
    [{"loc": ("body", "name"), "msg": "Field required"}] -> "name: Field required".
    """
    parts = []
    for e in errors:
        field = _field_name(e)
        parts.append(f"{field}: {e['msg']}" if field else e["msg"])
    return "; ".join(parts) or "Invalid request data"


def _field_name(error: dict) -> str:
    loc = [str(p) for p in error.get("loc", ())]
    if loc and loc[0] in ("body", "query", "path"):
        loc = loc[1:]
    return ".".join(loc)
