"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from product_catalog.config import Settings
from product_catalog.main import Application


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check returns status and product count."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products_loaded"] == 0
        assert data["components"]["catalog"] == "empty"

    def test_health_reports_loaded_catalog(self, client: TestClient, mouse_payload: dict):
        """Test catalog component turns healthy once products exist."""
        client.post("/products", json=mouse_payload)

        data = client.get("/health").json()
        assert data["components"]["catalog"] == "healthy"
        assert data["details"]["products_loaded"] == 1

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestListProducts:
    """Tests for GET /products."""

    def test_empty_catalog(self, client: TestClient):
        """Test empty store lists as an empty array."""
        response = client.get("/products")
        assert response.status_code == 200
        assert response.json() == []

    def test_lists_created_products(self, client: TestClient):
        """Test listing contains every created product, in any order."""
        first = client.post("/products", json={"name": "A", "price": 1.0}).json()
        second = client.post("/products", json={"name": "B", "price": 2.0}).json()

        response = client.get("/products")
        assert response.status_code == 200
        ids = {product["id"] for product in response.json()}
        assert ids == {first["id"], second["id"]}

    def test_seeded_application_lists_samples(self):
        """Test sample data is served when seeding is enabled."""
        application = Application(settings=Settings(seed_sample_data=True))

        with TestClient(application.app) as client:
            response = client.get("/products")

        names = {product["name"] for product in response.json()}
        assert names == {"Classic T-Shirt", "Slim Fit Jeans"}


class TestGetProduct:
    """Tests for GET /products/{id}."""

    def test_missing_product_returns_404(self, client: TestClient):
        """Test unknown identifier gives 404 with an empty body."""
        response = client.get("/products/does-not-exist")
        assert response.status_code == 404
        assert response.content == b""

    def test_round_trip(self, client: TestClient, mouse_payload: dict):
        """Test created product is returned unchanged by its identifier."""
        created = client.post("/products", json=mouse_payload).json()

        response = client.get(f"/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created


class TestCreateProduct:
    """Tests for POST /products."""

    def test_create_product(self, client: TestClient, mouse_payload: dict):
        """Test valid payload creates product with generated identifier."""
        response = client.post("/products", json=mouse_payload)
        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["id"], str) and data["id"]
        assert data["name"] == "Wireless Mouse"
        assert data["price"] == 29.99
        assert data["category"] == "Electronics"
        assert data["stock"] == 50
        assert data["description"] is None

    def test_stock_defaults_to_zero(self, client: TestClient):
        """Test omitted stock is stored as 0."""
        response = client.post("/products", json={"name": "Widget", "price": 5.0})
        assert response.status_code == 201
        product_id = response.json()["id"]

        stored = client.get(f"/products/{product_id}").json()
        assert stored["stock"] == 0

    def test_invalid_payload_reports_all_fields(self, client: TestClient):
        """Test blank name and negative price are both reported."""
        response = client.post("/products", json={"name": "", "price": -10.0})
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "VALIDATION_ERROR"
        fields = data["error"]["details"]["fields"]
        assert fields["name"] == "Product name is required"
        assert fields["price"] == "Price must be a positive value"

    def test_rejected_payload_leaves_store_unchanged(self, client: TestClient, mouse_payload: dict):
        """Test rejected creations never reach the store."""
        client.post("/products", json=mouse_payload)
        before = client.get("/products").json()

        invalid = [
            {"name": "", "price": 1.0},
            {"name": "Thing", "price": 0},
            {"name": "Thing", "price": 1.0, "description": "d" * 501},
            {"name": "Thing", "price": 1.0, "category": "c" * 51},
            {"name": "Thing", "price": 1.0, "stock": -1},
        ]
        for payload in invalid:
            assert client.post("/products", json=payload).status_code == 400

        assert client.get("/products").json() == before

    def test_price_too_large_for_float(self, client: TestClient):
        """Test an integer price beyond float range is a 400, not a server error."""
        response = client.post(
            "/products",
            content=b'{"name": "Widget", "price": 1' + b"0" * 400 + b"}",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        fields = response.json()["error"]["details"]["fields"]
        assert fields == {"price": "Price must be a positive value"}
        assert client.get("/products").json() == []

    def test_non_object_body(self, client: TestClient):
        """Test JSON arrays are rejected as bad requests."""
        response = client.post("/products", json=[1, 2, 3])
        assert response.status_code == 400
        assert "body" in response.json()["error"]["details"]["fields"]

    def test_malformed_json(self, client: TestClient):
        """Test unparseable body is reported as 400, not 422."""
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_client_supplied_id_is_ignored(self, client: TestClient):
        """Test the server always generates the identifier."""
        response = client.post(
            "/products",
            json={"id": "chosen-by-client", "name": "Widget", "price": 5.0}
        )
        assert response.status_code == 201
        assert response.json()["id"] != "chosen-by-client"
        assert client.get("/products/chosen-by-client").status_code == 404

    def test_created_products_get_distinct_ids(self, client: TestClient):
        """Test two creations receive different identifiers."""
        first = client.post("/products", json={"name": "Lamp", "price": 12.5})
        second = client.post("/products", json={"name": "Desk", "price": 120.0})
        assert first.status_code == second.status_code == 201
        assert first.json()["id"] != second.json()["id"]

    def test_concurrent_creations(self, client: TestClient):
        """Test parallel POSTs all succeed with distinct ids and are all listed."""
        payloads = [
            {"name": "Keyboard", "price": 49.0, "stock": 10},
            {"name": "Monitor", "price": 199.99, "category": "Electronics"},
        ] * 5

        with ThreadPoolExecutor(max_workers=len(payloads)) as pool:
            responses = list(pool.map(
                lambda payload: client.post("/products", json=payload), payloads
            ))

        assert all(response.status_code == 201 for response in responses)
        ids = {response.json()["id"] for response in responses}
        assert len(ids) == len(payloads)

        listed = {product["id"] for product in client.get("/products").json()}
        assert listed == ids


class TestServiceNotConfigured:
    """Tests for an application without a wired service."""

    def test_missing_service_is_internal_error(self):
        """Test routes fail with INTERNAL_ERROR when no service is wired."""
        application = Application(
            settings=Settings(seed_sample_data=False),
            service=None
        )
        application.app.state.product_service = None

        with TestClient(application.app) as client:
            response = client.get("/products")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"
