"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency functions that hand wired components to route handlers.

The Application factory constructs the ProductService explicitly and
stores it on ``app.state``; routes receive it through ``Depends``:

    @router.get("")
    async def list_products(service: ProductService = Depends(get_product_service)):
        ...

==============================================================================
"""

from __future__ import annotations

from fastapi import Request

from product_catalog.core import exceptions
from product_catalog.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """Get the ProductService wired into the running application."""
    service = getattr(request.app.state, "product_service", None)
    if service is None:
        raise exceptions.internal_error("Product service not configured")
    return service
