"""Application exceptions and FastAPI exception handlers.

Every error leaving the API uses the same body::

    {"error": "...", "message": "...", "details": [...], "requestId": "...", "path": "..."}

Domain errors raised below the API layer (nutrition validation, missing
recipes, provider failures) are translated here, so services never need to
know about HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipe_service.clients.spoonacular.exceptions import ExternalApiError
from recipe_service.observability.logging import get_logger
from recipe_service.schemas.base import APIResponse
from recipe_service.services.nutrition.exceptions import NutritionError
from recipe_service.services.recipes.exceptions import RecipeNotFoundError
from recipe_service.utils.sanitize import sanitize_query_string


if TYPE_CHECKING:
    from fastapi import Request


logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class ErrorDetail(APIResponse):
    """Structured detail for a single validation failure."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(APIResponse):
    """Structured error response body."""

    error: str
    message: str
    details: list[ErrorDetail] | None = None
    request_id: str | None = None
    path: str | None = None


class AppException(Exception):
    """Base application exception carrying its HTTP status."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="BAD_REQUEST",
            message=message,
        )


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="NOT_FOUND",
            message=message,
        )


class RateLimitException(AppException):
    """Rate limit exceeded exception."""

    def __init__(self, message: str = "Rate limit exceeded") -> None:
        super().__init__(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            error="RATE_LIMIT_EXCEEDED",
            message=message,
        )


class ServiceUnavailableException(AppException):
    """Service unavailable exception."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="SERVICE_UNAVAILABLE",
            message=message,
        )


class BadGatewayException(AppException):
    """Upstream provider returned an unusable response."""

    def __init__(self, message: str = "Recipe provider request failed") -> None:
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            error="BAD_GATEWAY",
            message=message,
        )


def from_external_api_error(exc: ExternalApiError) -> AppException:
    """Translate a provider failure into an API exception."""
    if exc.is_rate_limit_error:
        return RateLimitException(
            f"{exc.service_name} rate limit exceeded. Please try again later."
        )
    if exc.is_network_error or exc.is_server_error:
        return ServiceUnavailableException(
            f"{exc.service_name} is temporarily unavailable. Please try again later."
        )
    return BadGatewayException(f"{exc.service_name} request failed")


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request,
    exc: AppException,
    headers: dict[str, str] | None = None,
) -> ORJSONResponse:
    body = ErrorResponse(
        error=exc.error,
        message=exc.message,
        details=exc.details,
        request_id=_get_request_id(request),
        path=request.url.path,
    )
    return ORJSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _format_validation_error(error: dict) -> str:
    """Render one validation error as 'field: message'."""
    loc = [str(part) for part in error.get("loc", ()) if part not in ("query", "path", "body")]
    if not loc:
        return str(error["msg"])
    return f"{'.'.join(loc)}: {error['msg']}"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        """Handle application exceptions."""
        return _error_response(request, exc)

    @app.exception_handler(NutritionError)
    async def nutrition_exception_handler(
        request: Request,
        exc: NutritionError,
    ) -> ORJSONResponse:
        """Handle invalid ingredient exclusion requests."""
        logger.warning(
            "Invalid exclusion request",
            path=request.url.path,
            reason=str(exc),
        )
        return _error_response(request, BadRequestException(str(exc)))

    @app.exception_handler(RecipeNotFoundError)
    async def not_found_exception_handler(
        request: Request,
        exc: RecipeNotFoundError,
    ) -> ORJSONResponse:
        """Handle unknown recipe IDs."""
        logger.info("Recipe not found", recipe_id=exc.recipe_id)
        return _error_response(request, NotFoundException(str(exc)))

    @app.exception_handler(ExternalApiError)
    async def external_api_exception_handler(
        request: Request,
        exc: ExternalApiError,
    ) -> ORJSONResponse:
        """Handle recipe provider failures."""
        logger.error(
            "Recipe provider request failed",
            service=exc.service_name,
            status_code=exc.status_code,
            error=str(exc),
        )
        return _error_response(request, from_external_api_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        """Handle Starlette HTTP exceptions."""
        error = AppException(
            status_code=exc.status_code,
            error="HTTP_ERROR",
            message=str(exc.detail),
        )
        return _error_response(request, error, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Handle request validation errors as 400 with a joined message."""
        errors = exc.errors()
        details = [
            ErrorDetail(
                code="VALIDATION_ERROR",
                message=str(error["msg"]),
                field=".".join(str(loc) for loc in error["loc"]),
            )
            for error in errors
        ]
        message = "; ".join(_format_validation_error(error) for error in errors)
        logger.warning(
            "Request validation failed",
            path=request.url.path,
            query=sanitize_query_string(request.url.query),
            reason=message,
        )
        error = AppException(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="VALIDATION_ERROR",
            message=message or "Request validation failed",
            details=details,
        )
        return _error_response(request, error)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        """Handle unexpected exceptions."""
        logger.opt(exception=exc).error(
            "Unhandled exception",
            method=request.method,
            path=request.url.path,
        )
        error = AppException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="INTERNAL_SERVER_ERROR",
            message=INTERNAL_ERROR_MESSAGE,
        )
        return _error_response(request, error)
