"""Tests for the HTTP API application and its lifespan."""

import json

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app


@pytest.fixture
def env(monkeypatch):
    """Pin the portfolio settings so the lifespan is deterministic."""
    monkeypatch.setenv("PORTFOLIO_ROTATION_SECONDS", "3600")
    monkeypatch.delenv("PORTFOLIO_CONTENT_PATH", raising=False)
    monkeypatch.delenv("PORTFOLIO_DIRECTION_POLICY", raising=False)
    monkeypatch.delenv("PORTFOLIO_START_DARK", raising=False)


@pytest.fixture
def client(env):
    with TestClient(create_app()) as client:
        yield client


class TestCreateApp:
    """Tests for create_app factory."""

    def test_creates_app_with_defaults(self) -> None:
        app = create_app()
        assert app.title == "Portfolio API"
        assert app.version is not None

    def test_creates_app_with_custom_title(self) -> None:
        assert create_app(title="Custom API").title == "Custom API"

    def test_creates_app_with_custom_cors(self) -> None:
        app = create_app(cors_origins=["http://localhost:3000"])
        assert len(app.user_middleware) > 0

    def test_registers_routes(self) -> None:
        routes = {route.path for route in create_app().routes}
        assert {
            "/health",
            "/ready",
            "/live",
            "/page",
            "/state",
            "/scroll",
            "/theme",
            "/theme/toggle",
            "/carousel",
            "/carousel/select",
            "/ws/portfolio",
        } <= routes


class TestLifespan:
    def test_session_mounted_while_running(self, env) -> None:
        app = create_app()
        with TestClient(app):
            session = app.state.session
            assert session.is_mounted
        assert not session.is_mounted

    def test_content_file_is_loaded(self, env, monkeypatch, tmp_path) -> None:
        content = {
            "owner": "Ada",
            "role": "Backend Developer",
            "about": "About Ada",
            "github_url": "https://github.com/ada",
            "experience": {"title": "Consultant", "description": "APIs"},
            "projects": [
                {
                    "slug": "engine",
                    "name": "Engine",
                    "image": "engine.png",
                    "href": "https://example.com",
                    "description": "Analytical",
                }
            ],
        }
        path = tmp_path / "content.json"
        path.write_text(json.dumps(content), encoding="utf-8")
        monkeypatch.setenv("PORTFOLIO_CONTENT_PATH", str(path))

        with TestClient(create_app()) as client:
            page = client.get("/page").json()

        assert page["hero"]["title"] == "Hola, soy Ada"
        assert page["projects"]["card"]["slug"] == "engine"

    def test_start_light(self, env, monkeypatch) -> None:
        monkeypatch.setenv("PORTFOLIO_START_DARK", "false")
        with TestClient(create_app()) as client:
            assert client.get("/state").json()["is_dark"] is False


class TestHealthRoutes:
    def test_liveness(self, client) -> None:
        response = client.get("/live")
        assert response.status_code == 200
        assert response.json() == {"alive": True}

    def test_health_reports_carousel(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        names = {check["name"] for check in data["checks"]}
        assert names == {"carousel", "content"}

    def test_ready(self, client) -> None:
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json() == {"ready": True, "status": "healthy"}


class TestEndToEnd:
    def test_initial_state(self, client) -> None:
        assert client.get("/state").json() == {
            "active_index": 0,
            "direction": "forward",
            "is_dark": True,
        }

    def test_select_then_toggle(self, client) -> None:
        assert client.post("/carousel/select", json={"index": 2}).status_code == 200
        client.post("/theme/toggle")

        page = client.get("/page").json()
        assert page["shell"]["theme"] == "light"
        assert page["projects"]["active_index"] == 2
        assert page["projects"]["animation"]["enter_offset"] == "-100%"
