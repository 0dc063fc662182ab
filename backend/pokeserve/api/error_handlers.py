"""Error Handlers — global exception handlers rendering HTML error fragments.

Invariants:
    - PokeServeError → fragment with public_message at exc.http_status
    - RequestValidationError → 400 fragment naming the offending fields
    - Starlette HTTPException (unmatched route, wrong method) → fragment at its status
    - Exception (catch-all) → 500 fragment, never leaks internal details

Design Decisions:
    - Fragments, not JSON: every caller is an HTMX swap target expecting HTML
    - Layered handlers: domain (PokeServeError), routing (HTTPException),
      validation (Pydantic), catch-all (Exception)
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokeserve.api.dependencies import templates
from pokeserve.core.errors import PokeServeError

logger = logging.getLogger(__name__)

ERROR_TEMPLATE = "fragments/error.html"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _render_error(
    request: Request, code: str, message: str, status_code: int,
    headers: dict[str, str] | None = None,
):
    return templates.TemplateResponse(
        request, ERROR_TEMPLATE,
        {"code": code, "message": message},
        status_code=status_code,
        headers=headers,
    )


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PokeServeError)
    async def pokeserve_error_handler(request: Request, exc: PokeServeError):
        """Handle all PokeServe domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        api_error_type = getattr(exc, "api_error_type", None)
        if api_error_type:
            extra["api_error_type"] = api_error_type
        if exc.http_status >= 500:
            logger.error(f"PokeServeError: {exc.message}", extra=extra)
        else:
            logger.warning(f"PokeServeError: {exc.message}", extra=extra)
        return _render_error(
            request, exc.code, exc.public_message, exc.http_status,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unmatched routes, disallowed methods, and explicit HTTPExceptions."""
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        try:
            phrase = HTTPStatus(exc.status_code)
            code, default_message = phrase.name, phrase.phrase
        except ValueError:
            code, default_message = "HTTP_ERROR", "Request failed"
        message = exc.detail if isinstance(exc.detail, str) else default_message
        return _render_error(
            request, code, message, exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _render_error(
            request, "VALIDATION_ERROR", _describe_validation_error(exc),
            status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _render_error(
            request, "INTERNAL_ERROR", "An unexpected error occurred",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _describe_validation_error(exc: RequestValidationError) -> str:
    fields = [
        ".".join(str(loc) for loc in e["loc"]) for e in exc.errors()
    ]
    return f"Invalid request data: {', '.join(fields)}"
