# patron_api/adapters/api/errors.py
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from patron_api.core.domain.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from patron_api.shared.config import Settings

logger = structlog.get_logger()

# Most specific first: the first matching class wins
STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)

def status_for(exc: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR

def http_error_code(status_code: int) -> str:
    """"NOT_FOUND" for 404, "METHOD_NOT_ALLOWED" for 405, "HTTP_<n>" for unnamed codes."""
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return f"HTTP_{status_code}"

def error_response(status_code: int, code, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "code": code, "message": message},
    )

def _describe(errors) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"

def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """
    Installs the global handlers that turn errors into the standard error envelope.
    """

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error("request_failed", path=request.url.path, code=exc.code, error=exc.message)
            message = exc.message if settings.DEBUG else "Internal Server Error"
        else:
            logger.info("request_rejected", path=request.url.path, code=exc.code, error=exc.message)
            message = exc.message
        return error_response(status_code, exc.code, message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST, ValidationError.code, _describe(exc.errors())
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes framework HTTP errors (unknown routes, wrong methods).
        """
        return error_response(exc.status_code, http_error_code(exc.status_code), exc.detail)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to prevent leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_ERROR",
            "Internal Server Error" if not settings.DEBUG else str(exc),
        )
