"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request schemas using Pydantic.

==============================================================================
"""

from .product import CreateProductRequest

__all__ = [
    "CreateProductRequest",
]
