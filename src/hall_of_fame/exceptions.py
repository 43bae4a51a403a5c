"""Application-wide exception handlers."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from .validation import format_errors

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed path parameters or bodies become a 400 with the field map."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_errors(exc.errors(), strip_prefix=True),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log anything nobody else handled and answer with a generic 500."""
    request.app.state.logger.error(
        "Unhandled exception occurred on %s %s.",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": UNEXPECTED_ERROR_MESSAGE},
    )


async def catch_unhandled_exceptions(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Turn route errors into the generic 500 inside the CORS layer."""
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers to ``app``."""
    # Must run before CORS is added so CORS wraps it and decorates 500s too
    app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unhandled_exceptions)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
