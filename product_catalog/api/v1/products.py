"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing, fetching and creating products.

==============================================================================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from product_catalog.catalog.models import Product
from product_catalog.core.dependencies import get_product_service
from product_catalog.schemas.product import CreateProductRequest
from product_catalog.services.product_service import ProductService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def list_products(self) -> List[Product]:
        """List all products."""
        return self._service.list_all()

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get product by identifier, or None."""
        return self._service.get_by_id(product_id)

    def create_product(self, request: CreateProductRequest) -> Product:
        """Create a product from a validated request."""
        return self._service.create(request)


@router.get("", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    controller = ProductController(service)
    return controller.list_products()


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={404: {"description": "Product not found"}},
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get product by identifier. Answers 404 with an empty body when absent."""
    controller = ProductController(service)
    product = controller.get_product(product_id)

    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return product


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid request data"}},
)
async def create_product(
    request: CreateProductRequest,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product in the catalog.

    Invalid bodies never reach the service; they are answered with 400
    listing every offending field.
    """
    controller = ProductController(service)
    return controller.create_product(request)
