"""
==============================================================================
Product Store Module
==============================================================================

In-memory, thread-safe product storage keyed by identifier.

Features:
---------
- Lock-guarded dictionary; callers never see the lock
- Snapshot reads (callers iterate a copy, never the live map)
- UUID4 identifiers assigned on first save
- Optional sample data for demos

==============================================================================
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Iterable, List, Optional

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = (
    Product(
        name="Classic T-Shirt",
        description="Cotton t-shirt in white",
        price=19.99,
        category="Tops",
        stock=100,
    ),
    Product(
        name="Slim Fit Jeans",
        description="Dark blue slim fit jeans",
        price=49.99,
        category="Bottoms",
        stock=50,
    ),
)


class ProductStore:
    """
    Product store backed by a lock-guarded dictionary.

    Every public method takes the internal lock, so ``save`` is an atomic
    insert-or-replace and readers never observe a half-written entry.
    Products are immutable, which makes the list returned by ``find_all``
    a safe snapshot.

    Example:
        >>> store = ProductStore()
        >>> saved = store.save(Product(name="Widget", price=5.0))
        >>> store.find_by_id(saved.id) == saved
        True
    """

    def __init__(self, initial: Optional[Iterable[Product]] = None) -> None:
        """
        Initialize the store.

        Args:
            initial: Products to save at construction time
        """
        self._products: Dict[str, Product] = {}
        self._lock = threading.Lock()

        for product in initial or ():
            self.save(product)

    @classmethod
    def with_sample_data(cls) -> "ProductStore":
        """Create a store pre-populated with the demo products."""
        store = cls(SAMPLE_PRODUCTS)
        logger.info(f"Seeded store with {len(store)} sample products")
        return store

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def find_all(self) -> List[Product]:
        """Get a snapshot of all products."""
        with self._lock:
            return list(self._products.values())

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by identifier, or None."""
        with self._lock:
            return self._products.get(product_id)

    def count(self) -> int:
        """Get number of stored products."""
        with self._lock:
            return len(self._products)

    def __len__(self) -> int:
        return self.count()

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def save(self, product: Product) -> Product:
        """
        Insert or replace a product.

        Products without an identifier get a fresh one first.

        Args:
            product: Product to store

        Returns:
            The stored product, carrying its identifier
        """
        with self._lock:
            if product.id is None:
                product = product.model_copy(update={"id": self._next_id()})
            self._products[product.id] = product

        logger.debug(f"Saved product {product.id}")
        return product

    def _next_id(self) -> str:
        # Caller holds the lock.
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in self._products:
                return candidate
