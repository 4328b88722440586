"""
Error handling middleware.
Turns every failure into the standard ErrorResponse envelope.
"""
import logging
import traceback
from datetime import datetime, timezone
from typing import Callable, List, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from assistant.api.models.error import ErrorResponse
from assistant.services.gemini.exceptions import GeminiError

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    error: str,
    message: str,
    path: str,
    details: Optional[List[str]] = None,
    envelope_status: Optional[int] = None,
) -> JSONResponse:
    """
    Build a JSON error response.

    ``envelope_status`` overrides the status reported inside the body, so an
    upstream status can be kept while the HTTP status stays generic.
    """
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=envelope_status if envelope_status is not None else status_code,
        error=error,
        message=message,
        path=path,
        details=details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _format_validation_errors(errors) -> List[str]:
    details = []
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part != "body"]
        # JSON decode errors end in a character offset, not a field name
        if loc and not isinstance(loc[-1], str):
            loc = loc[:-1]
        field = ".".join(str(part) for part in loc)
        details.append(f"{field or 'body'}: {err.get('msg')}")
    return details


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = _format_validation_errors(exc.errors())
    logger.warning(
        "Validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": details,
        },
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        "Invalid input data",
        request.url.path,
        details=details,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        exc.status_code,
        "HTTP Error",
        str(exc.detail),
        request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render framework-level errors with the ErrorResponse envelope."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except GeminiError as e:
            logger.error(
                "AI service error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": e.message,
                    "error_type": type(e).__name__,
                    "upstream_status": e.status_code,
                },
            )
            # Clients cannot act on the vendor's status, so the HTTP status is always 500
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                e.error,
                e.message,
                request.url.path,
                envelope_status=e.status_code,
            )

        except Exception as e:
            tb_str = traceback.format_exc()

            from assistant.config.settings import get_settings

            try:
                is_production = get_settings().is_production
            except Exception:
                is_production = True  # Settings unavailable, assume production

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "traceback": tb_str if not is_production else None,
                },
                exc_info=True,
            )

            # Don't expose internal errors in production
            if is_production:
                message = "An internal error occurred. Please try again later."
                details = None
            else:
                message = f"{type(e).__name__}: {str(e)}"
                details = tb_str.splitlines()

            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal Server Error",
                message,
                request.url.path,
                details=details,
            )
