"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

import inspect
from unittest.mock import patch

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from app.core import config
from app.core.config import Settings
from app.infrastructure.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)
from app.main import cosmos_options, create_app

client = TestClient(
    create_app(
        settings=Settings(version="9.9.9", cosmos_key="unused"),
        repository=InMemoryProductRepository(),
    )
)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        response = client.get("/api/v1/health")
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == "9.9.9"


class TestCompositionRoot:
    """Tests for repository wiring in create_app."""

    def test_builds_cosmos_repository_from_settings(self) -> None:
        settings = Settings(
            cosmos_endpoint="https://acct.documents.azure.com:443/",
            cosmos_database="CatalogDB",
            cosmos_container="Items",
            cosmos_key="secret",
        )
        with patch("app.main.CosmosProductRepository.from_options") as from_options:
            app = create_app(settings=settings)

        options = from_options.call_args.args[0]
        assert options.endpoint == "https://acct.documents.azure.com:443/"
        assert options.database_id == "CatalogDB"
        assert options.container_id == "Items"
        assert options.key == "secret"
        assert app.state.product_repository is from_options.return_value
        assert app.state.owns_repository is True

    def test_injected_repository_is_used(self) -> None:
        repo = InMemoryProductRepository()
        app = create_app(settings=Settings(cosmos_key="unused"), repository=repo)
        assert app.state.product_repository is repo
        assert app.state.owns_repository is False

    def test_empty_key_selects_default_credential(self) -> None:
        assert cosmos_options(Settings(cosmos_key="")).key is None

    def test_config_does_not_depend_on_infrastructure(self) -> None:
        assert "app.infrastructure" not in inspect.getsource(config)

    def test_included_routes_are_plain_api_routes(self) -> None:
        """SlowAPIMiddleware only resolves limits for APIRoute entries."""
        app = create_app(
            settings=Settings(cosmos_key="unused"),
            repository=InMemoryProductRepository(),
        )
        paths = {route.path for route in app.routes if isinstance(route, APIRoute)}
        assert {"/api/v1/health", "/api/v1/products", "/api/v1/products/{product_id}"} <= paths
