"""
Tests for login and the bearer-token gate on mutating endpoints
"""

from datetime import timedelta


class TestLogin:
    """POST /api/auth/login"""

    def test_login_returns_token(self, client, manager_password):
        response = client.post("/api/auth/login", json={"password": manager_password})
        assert response.status_code == 200
        assert response.json()["token"]

    def test_wrong_password(self, client):
        response = client.post("/api/auth/login", json={"password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid password"}

    def test_missing_password(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Password required"}


class TestGate:
    """Mutations need a valid token, reads do not"""

    def test_missing_header(self, client):
        response = client.post("/api/drivers", data={"name": "A"})
        assert response.status_code == 401
        assert response.json() == {"error": "Missing auth header"}

    def test_invalid_token(self, client):
        response = client.delete("/api/works/1", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_expired_token(self, client):
        gate = client.app.state.credential_gate
        token = gate.create_access_token(expires_delta=timedelta(seconds=-5))
        response = client.delete("/api/drivers/1", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_reads_are_public(self, client):
        assert client.get("/api/drivers").status_code == 200
        assert client.get("/api/works").status_code == 200


class TestMisc:
    """Root banner and health check"""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Driver Management API"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "environment": "testing"}
