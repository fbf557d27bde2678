"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides an isolated store, service, application and test client per test.

==============================================================================
"""

import pytest
from typing import Dict, Generator
from fastapi.testclient import TestClient

from product_catalog.catalog.store import ProductStore
from product_catalog.config import Settings
from product_catalog.main import Application
from product_catalog.services.product_service import ProductService


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def store() -> ProductStore:
    """Create an empty product store."""
    return ProductStore()


@pytest.fixture
def service(store: ProductStore) -> ProductService:
    """Create a product service over the test store."""
    return ProductService(store)


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: no sample data."""
    return Settings(seed_sample_data=False, debug=False)


@pytest.fixture
def client(test_settings: Settings, service: ProductService) -> Generator[TestClient, None, None]:
    """Create test client for an application wired to the test service."""
    application = Application(settings=test_settings, service=service)

    with TestClient(application.app) as test_client:
        yield test_client


# ============================================================================
# PAYLOAD FIXTURES
# ============================================================================

@pytest.fixture
def mouse_payload() -> Dict:
    """Valid creation payload without a description."""
    return {
        "name": "Wireless Mouse",
        "price": 29.99,
        "category": "Electronics",
        "stock": 50
    }
