"""Error handling middleware and exception handlers."""

from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core import config
from src.core.metrics import record_validation_failure
from src.domain.exceptions import DomainException
from src.presentation.schemas import error_body
from .request_context import get_request_id
from .validation import collect_validation_messages, is_json_error

logger = structlog.get_logger(__name__)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Every failure is answered with the success=false envelope.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed JSON and invalid request bodies."""
        errors = exc.errors()

        if is_json_error(errors):
            logger.warning("invalid_json_body", path=request.url.path)
            return JSONResponse(
                status_code=400,
                content=error_body("Invalid JSON", "Request body contains invalid JSON"),
            )

        messages = collect_validation_messages(errors)
        record_validation_failure()
        logger.info(
            "validation_failed",
            path=request.url.path,
            violations=messages,
        )
        return JSONResponse(
            status_code=400,
            content=error_body("Validation failed", ", ".join(messages)),
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(
        request: Request,
        exc: RateLimitExceeded,
    ) -> JSONResponse:
        """Handle clients over their request quota."""
        logger.warning(
            "rate_limit_exceeded",
            path=request.url.path,
            limit=str(exc.detail),
        )
        return JSONResponse(
            status_code=429,
            content=error_body(
                "Too many requests",
                "Rate limit exceeded. Please try again later.",
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle unknown routes and other framework HTTP errors."""
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content=error_body(
                    "Not found",
                    f"Route {request.method} {request.url.path} not found",
                ),
            )

        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(HTTPStatus(exc.status_code).phrase, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle domain exceptions, hiding internal detail in production."""
        detail = getattr(exc, "detail", None)
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
            detail=detail,
        )

        message = exc.message
        if detail and not config.settings.is_production:
            message = f"{exc.message}: {detail}"

        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.error, message),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        if config.settings.is_production:
            message = "Something went wrong"
        else:
            message = str(exc) or type(exc).__name__
        return JSONResponse(
            status_code=500,
            content=error_body("Internal server error", message),
        )
