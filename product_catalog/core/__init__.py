"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException class, handlers and error factory functions
- dependencies: FastAPI dependency functions

Usage:
------
    from product_catalog.core import exceptions
    raise exceptions.validation_failed([("price", "Price is required")])

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "register_exception_handlers",
]
