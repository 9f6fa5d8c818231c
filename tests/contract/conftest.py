"""Fixtures running the full application against a temporary database."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

PASSWORD = "correct-horse-battery"


@pytest.fixture
def app(tmp_path, monkeypatch):
    from infrastructure.container import reset_container
    from presentation.main import create_app

    monkeypatch.setenv("APP_DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("APP_JWT_SECRET_KEY", "contract-test-secret")
    monkeypatch.setenv("APP_LOG_LEVEL", "WARNING")
    reset_container()
    yield create_app()
    reset_container()


@pytest.fixture
def client(app):
    from starlette.testclient import TestClient

    with TestClient(app) as client:
        yield client


@pytest.fixture
def register(client):
    """Register a user and return ``(user_json, auth_headers)``."""

    def _register(username: str, password: str = PASSWORD):
        resp = client.post("/api/v1/auth/register", json={"username": username, "password": password})
        assert resp.status_code == 201, resp.text
        login = client.post("/api/v1/auth/login", json={"username": username, "password": password})
        assert login.status_code == 200, login.text
        return resp.json(), {"Authorization": f"Bearer {login.json()['token']}"}

    return _register


@pytest.fixture
def admin_headers(register):
    _, headers = register("AdminUser")
    return headers


@pytest.fixture
def regular(register, admin_headers):
    """A regular user registered after the administrator."""
    return register("RegularUser")
