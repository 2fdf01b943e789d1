"""Error Handlers: global exception handlers mapping every failure to the envelope.

Invariants:
    - SmartTransportError → {success: false, message} with the error's http_status
    - RequestValidationError (bad JSON, wrong field types) → 400 naming the offending fields
    - Starlette HTTPException (unknown route, wrong method) → envelope with its own status
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from smart_transport.core.envelope import failure_envelope
from smart_transport.core.errors import InvalidFieldsError, SmartTransportError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SmartTransportError)
    async def domain_error_handler(request: Request, exc: SmartTransportError):
        """Handle all domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                **exc.log_extra(),
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
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
        error = InvalidFieldsError(_invalid_fields(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=failure_envelope(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failure_envelope("An unexpected error occurred"),
        )


def _invalid_fields(exc: RequestValidationError) -> list[str]:
    """Dotted field paths without the leading body/path/query marker."""
    fields = []
    for e in exc.errors():
        if e.get("type") == "json_invalid":
            loc = ["body"]
        else:
            loc = [str(part) for part in e["loc"]]
            if loc and loc[0] in ("body", "path", "query"):
                loc = loc[1:]
        name = ".".join(loc)
        if name and name not in fields:
            fields.append(name)
    return fields
