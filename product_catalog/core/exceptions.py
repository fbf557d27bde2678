"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_catalog.schemas.product import CREATE_PRODUCT_MESSAGES
from product_catalog.utils.validators import ValidationErrorTranslator


# Module logger
logger = logging.getLogger(__name__)

_translator = ValidationErrorTranslator(CREATE_PRODUCT_MESSAGES)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Invalid product data", "VALIDATION_ERROR", 400)

    Error Codes:
        - VALIDATION_ERROR (400)
        - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "VALIDATION_ERROR")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to consistent JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Report request validation failures as 400 in the AppException format.

    FastAPI answers these with 422 by default; the catalog API treats every
    invalid or malformed creation payload as a bad request and lists each
    offending field.
    """
    errors = _translator.translate(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {dict(errors)}")

    return await app_exception_handler(request, validation_failed(errors))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def validation_failed(errors: Iterable[Tuple[str, str]]) -> AppException:
    """Create validation exception listing every offending field."""
    fields: Dict[str, str] = {}
    for field, message in errors:
        fields.setdefault(field, message)

    return AppException(
        "Invalid product data",
        "VALIDATION_ERROR",
        status.HTTP_400_BAD_REQUEST,
        {"fields": fields}
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
