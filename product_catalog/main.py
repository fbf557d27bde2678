"""
==============================================================================
Product Catalog API - Application Entry Point
==============================================================================

FastAPI application with:
- Product catalog endpoints (list, get, create)
- Health check endpoints
- In-memory, thread-safe product store

Usage:
------
    # Development
    uvicorn product_catalog.main:app --reload

    # Production
    uvicorn product_catalog.main:app --host 0.0.0.0 --port 8080

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_catalog import __version__
from product_catalog.api.router import api_router
from product_catalog.catalog.store import ProductStore
from product_catalog.config import Settings, get_settings
from product_catalog.core.exceptions import register_exception_handlers
from product_catalog.services.product_service import ProductService


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Wires the object graph explicitly: store → service → HTTP routes.
    The service ends up on ``app.state.product_service`` where the route
    dependencies pick it up.

    Example:
        >>> service = ProductService(ProductStore())
        >>> app = Application(service=service).app
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        service: Optional[ProductService] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
            service: Pre-built ProductService (built from settings if None)
        """
        self._settings = settings or get_settings()
        self._service = service or self._build_service()
        self._app = self._create_app()

    def _build_service(self) -> ProductService:
        """Construct the store and the service around it."""
        if self._settings.seed_sample_data:
            store = ProductStore.with_sample_data()
        else:
            store = ProductStore()
        return ProductService(store)

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        docs_enabled = self._settings.docs_enabled

        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="In-memory product catalog with list, lookup and creation",
            lifespan=self._lifespan,
            docs_url="/docs" if docs_enabled else None,
            redoc_url="/redoc" if docs_enabled else None,
        )

        app.state.product_service = self._service

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name} ({self._settings.app_env})")
        logger.info(f"✅ Catalog holds {self._service.count()} products")
        if self._settings.docs_enabled:
            logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def service(self) -> ProductService:
        """Get the wired ProductService."""
        return self._service

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
