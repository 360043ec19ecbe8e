"""
Pytest configuration and fixtures for the driver management API
"""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

MANAGER_PASSWORD = "manager-test-password"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file and upload directory"""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        MANAGER_PASSWORD=MANAGER_PASSWORD,
        JWT_SECRET_KEY="test_jwt_secret_for_testing_only",
        JWT_EXPIRES_IN="8h",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        ENVIRONMENT="testing",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    """Test client; entering it runs startup, which creates the tables"""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Bearer header for a logged-in manager"""
    response = client.post("/api/auth/login", json={"password": MANAGER_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def driver(client, auth_headers):
    """A stored driver record"""
    response = client.post("/api/drivers", data={"name": "Test Driver"}, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def create_work(client, auth_headers):
    """Post a work session and return the response"""
    def _create(**fields):
        return client.post("/api/works", json=fields, headers=auth_headers)
    return _create


@pytest.fixture
def manager_password():
    return MANAGER_PASSWORD
