"""
Tests for health check and root endpoints.
"""


def test_health_check(client):
    response = client.get("/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "Gradebook Analysis API"
    assert "timestamp" in data


def test_ping(client):
    response = client.get("/v1/ping")

    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/v1/docs"


def test_request_id_generated(client):
    response = client.get("/v1/ping")

    assert response.headers["X-Request-ID"]
