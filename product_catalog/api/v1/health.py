"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends

from product_catalog.core.dependencies import get_product_service
from product_catalog.services.product_service import ProductService


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def check_catalog(self) -> dict:
        """Check catalog status."""
        products = self._service.count()
        if products:
            return {"status": "healthy", "products": products}
        return {"status": "empty", "products": 0}

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()

        return {
            "status": "healthy",
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": catalog_info["products"]
            }
        }


@router.get("")
async def health_check(service: ProductService = Depends(get_product_service)):
    """
    Health check endpoint.

    Returns API and catalog status with the number of stored products.
    """
    controller = HealthController(service)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
