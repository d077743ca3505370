"""Unit tests for health check and metrics endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from skyride import __version__
from skyride.api.dependencies import get_session_store, get_settings, reset_dependencies
from skyride.api.routes import register_routes
from skyride.conversation.stores.inmemory import InMemorySessionStore


@pytest.fixture
def mock_settings() -> MagicMock:
    """Mock settings."""
    settings = MagicMock()
    settings.debug = False
    return settings


@pytest.fixture
def session_store() -> InMemorySessionStore:
    """In-memory session store."""
    return InMemorySessionStore()


@pytest.fixture
async def app(mock_settings: MagicMock, session_store: InMemorySessionStore) -> FastAPI:
    """Create test FastAPI app."""
    await reset_dependencies()

    app = FastAPI()
    register_routes(app)

    app.dependency_overrides[get_settings] = lambda: mock_settings
    app.dependency_overrides[get_session_store] = lambda: session_store

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_returns_200_when_healthy(self, client: TestClient) -> None:
        """Health check returns 200 when the store responds."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert "timestamp" in data
        assert [c["name"] for c in data["components"]] == ["session_store"]

    def test_health_reports_failing_store(
        self, app: FastAPI, client: TestClient
    ) -> None:
        """A store that raises is reported as unhealthy."""
        broken = MagicMock()
        broken.list_ids = AsyncMock(side_effect=ConnectionError("store offline"))
        app.dependency_overrides[get_session_store] = lambda: broken

        data = client.get("/health").json()

        assert data["status"] == "unhealthy"
        assert data["components"][0]["message"] == "store offline"


class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    def test_metrics_returns_prometheus_format(self, client: TestClient) -> None:
        """Metrics endpoint returns Prometheus format."""
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers.get("content-type", "")

    def test_metrics_include_skyride_counters(self, client: TestClient) -> None:
        assert "skyride_turns_processed" in client.get("/metrics").text

    @pytest.mark.asyncio
    async def test_metrics_route_can_be_disabled(self) -> None:
        app = FastAPI()
        register_routes(app, metrics_path=None)

        assert TestClient(app).get("/metrics").status_code == 404
