import re

import pytest


def test_root_returns_welcome_message(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert "Hello from CI/CD Pipeline" in body["message"]
    assert body["environment"] == "test"
    assert body["version"] == "1.0.0"
    assert body["deployed"] is True
    assert body["monitoring"]["health"] == "/health"


def test_timestamps_are_iso_utc(client):
    body = client.get("/").json()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", body["timestamp"])


def test_health_returns_ok(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["service"] == "CI/CD Demo App"
    assert body["uptime"] >= 0
    assert set(body["memory"]) == {"rss", "heapTotal", "heapUsed", "external"}
    assert body["node_version"].startswith("v")


def test_api_info(client):
    resp = client.get("/api/info")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "CI/CD Demo API"
    assert body["status"] == "operational"
    assert body["deployment"] == "Railway"
    assert isinstance(body["features"], list) and body["features"]


def test_nonexistent_route_returns_404(client):
    resp = client.get("/nonexistent")
    assert resp.status_code == 404
    body = resp.json()
    assert body["path"] == "/nonexistent"
    assert body["method"] == "GET"
    assert "GET /health" in body["available_endpoints"]


def test_wrong_method_returns_404(client):
    resp = client.post("/health")
    assert resp.status_code == 404
    assert resp.json()["method"] == "POST"


def test_metrics_reports_request_counts(client):
    client.get("/")
    client.get("/")
    client.get("/health")
    client.get("/nonexistent")

    resp = client.get("/metrics")
    assert resp.status_code == 200
    requests = resp.json()["requests"]
    # The metrics request itself is counted before dispatch.
    assert requests["total"] == 5
    assert requests["by_endpoint"] == {"/": 2, "/health": 1, "/nonexistent": 1, "/metrics": 1}
    assert requests["total"] == sum(requests["by_endpoint"].values())


def test_metrics_system_section(client):
    body = client.get("/metrics").json()
    system = body["system"]
    for key in ("rss", "heapTotal", "heapUsed", "external"):
        assert re.fullmatch(r"\d+ MB", system["memory"][key])
    assert set(system["cpu"]) == {"user", "system"}
    assert isinstance(system["pid"], int)
    assert system["platform"]
    assert body["environment"] == {"NODE_ENV": "test", "PORT": 3000}


def test_counters_are_isolated_per_app(client, counters):
    client.get("/health")
    assert counters.snapshot().by_endpoint == {"/health": 1}


def test_security_headers(client):
    resp = client.get("/security")
    assert resp.status_code == 200
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"
    assert resp.headers["X-XSS-Protection"] == "1; mode=block"
    assert resp.headers["Strict-Transport-Security"].startswith("max-age=")
    body = resp.json()
    assert body["headers"]["X-Frame-Options"] == "DENY"
    assert "timestamp" in body


@pytest.mark.parametrize("path", ["/", "/health", "/metrics", "/nonexistent"])
def test_cors_headers_on_every_response(client, path):
    resp = client.get(path)
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert resp.headers["Access-Control-Allow-Headers"] == "Origin, X-Requested-With, Content-Type, Accept"


def test_request_id_header(client):
    first = client.get("/health").headers["X-Request-ID"]
    second = client.get("/health").headers["X-Request-ID"]
    assert first and second and first != second


def _shape(value):
    if isinstance(value, dict):
        return {k: _shape(v) for k, v in value.items() if k != "by_endpoint"}
    return type(value).__name__


@pytest.mark.parametrize("path", ["/", "/health", "/metrics", "/security", "/api/info", "/nonexistent"])
def test_response_shape_is_stable(client, path):
    first = client.get(path)
    second = client.get(path)
    assert first.status_code == second.status_code
    assert _shape(first.json()) == _shape(second.json())


def test_json_body_is_tolerated(client):
    assert client.post("/nonexistent", content=b"{not json", headers={"Content-Type": "application/json"}).status_code == 404
    assert client.request("GET", "/health", content=b"", headers={"Content-Type": "application/json"}).status_code == 200
    assert client.request("GET", "/health", json={"ignored": True}).status_code == 200
