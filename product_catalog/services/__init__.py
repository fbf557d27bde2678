"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Architecture Pattern: Service Layer
----------------------------------

    ┌─────────────────┐
    │   API Router    │  ← Validation, status codes
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Request → entity mapping
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │     Store       │  ← In-memory storage
    └─────────────────┘

Services receive their dependencies via constructor.

==============================================================================
"""

from .product_service import ProductService

__all__ = [
    "ProductService",
]
