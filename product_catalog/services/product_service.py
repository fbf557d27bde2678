"""
==============================================================================
Product Service Module
==============================================================================

Service layer between the HTTP API and the product store.

This module implements:
- ProductService: Listing, lookup and creation of products

The service decouples the wire format (CreateProductRequest) from the
stored entity (Product). Its only rule is defaulting stock to zero.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from product_catalog.catalog.models import Product
from product_catalog.catalog.store import ProductStore
from product_catalog.schemas.product import CreateProductRequest


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog service.

    Attributes:
        _store: ProductStore holding all products

    Example:
        >>> service = ProductService(ProductStore())
        >>> product = service.create(CreateProductRequest(name="Widget", price=5.0))
        >>> product.stock
        0
        >>> service.get_by_id(product.id) == product
        True
    """

    def __init__(self, store: ProductStore) -> None:
        """
        Initialize the product service.

        Args:
            store: Store that owns the products
        """
        self._store = store

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_all(self) -> List[Product]:
        """Get every stored product. Order is not significant."""
        return self._store.find_all()

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find a product by identifier.

        Args:
            product_id: Product identifier

        Returns:
            Product, or None if no product has this identifier
        """
        product = self._store.find_by_id(product_id)

        if product is None:
            logger.debug(f"Product not found: {product_id}")

        return product

    def count(self) -> int:
        """Get number of stored products."""
        return self._store.count()

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def create(self, request: CreateProductRequest) -> Product:
        """
        Create a product from a validated request.

        Args:
            request: Validated creation request

        Returns:
            Persisted product with its generated identifier
        """
        product = Product(
            name=request.name,
            description=request.description,
            price=request.price,
            category=request.category,
            stock=request.stock if request.stock is not None else 0,
        )

        saved = self._store.save(product)

        logger.info(f"✅ Created product {saved.id} ({saved.name})")
        return saved
