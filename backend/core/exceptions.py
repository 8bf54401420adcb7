"""
Custom exception handlers for consistent API error responses.

Every failure is contained to the action that triggered it: the handler
logs what went wrong and returns a short, user-facing message. Database
driver errors are never echoed back to the client.
"""

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

GENERIC_DATABASE_MESSAGE = "A database error occurred. Please try again."


class APIError(HTTPException):
    """Base API error with consistent structure"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class NotFoundError(APIError):
    """Resource not found error"""

    def __init__(
        self, detail: str = "Resource not found", error_code: str = "NOT_FOUND"
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, detail=detail, error_code=error_code
        )


class ValidationError(APIError):
    """Validation error raised before anything is written"""

    def __init__(
        self, detail: str = "Validation failed", error_code: str = "VALIDATION_ERROR"
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code,
        )


class ConflictError(APIError):
    """Resource conflict error"""

    def __init__(self, detail: str = "Resource conflict", error_code: str = "CONFLICT"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT, detail=detail, error_code=error_code
        )


class PersistenceError(APIError):
    """Some or all writes of an operation failed"""

    def __init__(
        self,
        detail: str = "Changes could not be saved",
        error_code: str = "PERSISTENCE_ERROR",
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code=error_code,
        )


def _error_body(request: Request, detail: str, error_code: str) -> Dict[str, Any]:
    return {
        "detail": detail,
        "error_code": error_code,
        "path": str(request.url.path),
    }


async def handle_key_error(request: Request, exc: KeyError) -> JSONResponse:
    """Convert KeyError to consistent API response"""
    logger.warning(f"KeyError at {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(request, f"Resource not found: {str(exc)}", "NOT_FOUND"),
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Convert ValueError to consistent API response"""
    logger.warning(f"ValueError at {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(request, str(exc), "VALIDATION_ERROR"),
    )


async def handle_database_error(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Log the driver error and answer with a generic message"""
    logger.error(f"Database error at {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, GENERIC_DATABASE_MESSAGE, "DATABASE_ERROR"),
    )


async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors"""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} at {request.url.path}: {exc.detail}")
    else:
        logger.warning(f"{exc.error_code} at {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.detail, exc.error_code),
        headers=exc.headers,
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(KeyError, handle_key_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(APIError, handle_api_error)
