"""
==============================================================================
Catalog Package - Product Storage
==============================================================================

Product entity and the in-memory store that owns it.

Classes:
--------
- Product: Immutable Pydantic model for products
- ProductStore: Thread-safe keyed storage with identifier generation

==============================================================================
"""

from .models import Product
from .store import ProductStore, SAMPLE_PRODUCTS

__all__ = [
    "Product",
    "ProductStore",
    "SAMPLE_PRODUCTS",
]
