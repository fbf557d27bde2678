"""
==============================================================================
Utilities Package
==============================================================================

Utility classes for the application.

Modules:
--------
- validators: Translation of Pydantic errors into per-field messages

==============================================================================
"""

from .validators import ValidationErrorTranslator

__all__ = [
    "ValidationErrorTranslator",
]
