"""Exception handlers for the FastAPI application."""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode, ProfileValidationError

logger = structlog.get_logger()


def _error_body(error_code: str, message: str, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error_code": error_code, "message": message}
    body.update({key: value for key, value in extra.items() if value is not None})
    return body


def _format_validation_error(error: dict[str, Any]) -> str:
    location = [str(part) for part in error["loc"] if part != "body"]
    if not location:
        return str(error["msg"])
    return f"{'.'.join(location)}: {error['msg']}"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
        )
        errors = exc.errors if isinstance(exc, ProfileValidationError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.error_code.value, exc.message, errors=errors),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions from FastAPI/Starlette."""
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body("HTTP_ERROR", str(exc.detail)),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies as ordinary 400 validation errors."""
        logger.info("validation_error", errors=exc.errors())
        return JSONResponse(
            status_code=400,
            content=_error_body(
                ErrorCode.VALIDATION_ERROR.value,
                "Validation error",
                errors=[_format_validation_error(error) for error in exc.errors()],
            ),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content=_error_body(
                ErrorCode.INTERNAL_ERROR.value,
                "Server error",
                error=None if settings.is_production else str(exc),
            ),
        )
