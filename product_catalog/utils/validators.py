"""
==============================================================================
Validation Utilities Module
==============================================================================

Turns Pydantic validation errors into per-field messages.

This module implements:
- ValidationErrorTranslator: Maps ``ValidationError.errors()`` entries to
  ``(field, message)`` pairs using a message table

The rules themselves live on the request schemas; this module only
decides how a violation is worded for API clients.

==============================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


FieldError = Tuple[str, str]


class ValidationErrorTranslator:
    """
    Translator from Pydantic error dicts to field messages.

    Example:
        >>> translator = ValidationErrorTranslator({("price", "missing"): "Price is required"})
        >>> translator.translate([{"loc": ("body", "price"), "type": "missing", "msg": "Field required"}])
        [('price', 'Price is required')]
    """

    def __init__(self, messages: Optional[Mapping[Tuple[str, str], str]] = None) -> None:
        """
        Initialize the translator.

        Args:
            messages: Message per (field, error type); others keep Pydantic's text
        """
        self._messages = dict(messages or {})

    def translate(self, errors: Iterable[Dict[str, Any]]) -> List[FieldError]:
        """
        Translate error entries, keeping their order.

        Args:
            errors: Entries as returned by ``errors()`` on a validation error

        Returns:
            List of (field, message) pairs
        """
        translated = []
        for error in errors:
            field = self.field_name(error.get("loc", ()))
            message = self._messages.get(
                (field, error.get("type", "")),
                error.get("msg", "Invalid value")
            )
            translated.append((field, message))
        return translated

    @staticmethod
    def field_name(location: Iterable[Any]) -> str:
        """Get the field a location points at, or ``body`` for the whole payload."""
        # Integer parts are list indexes or JSON decode positions
        parts = [part for part in location if isinstance(part, str) and part != "body"]
        return parts[0] if parts else "body"
