# This file tests API health, readiness, version, and metrics endpoints.
# It exists to validate operational contracts used by orchestration and monitoring.
# The tests confirm request IDs are always returned and readiness reflects the store.

from __future__ import annotations

from pathlib import Path

from tests.api.support import api_test_client, build_database, build_test_config


def test_health_endpoint_returns_expected_fields(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        response = client.get("/health", headers={"x-request-id": "req-123"})

    assert response.status_code == 200
    assert response.headers["x-request-id"] == "req-123"
    assert "x-response-time-ms" in response.headers
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["service_name"] == config.api_name
    assert payload["request_id"] == "req-123"


def test_ready_endpoint_reports_schema(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        response = client.get("/ready")

    payload = response.json()
    assert payload["db_connected"] is True
    assert payload["missing_tables"] == []
    assert payload["ready"] is True
    assert payload["database"] == "reachable"


def test_ready_endpoint_lists_missing_tables(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    db = build_database(config, with_schema=False)
    with api_test_client(config=config, db=db) as client:
        response = client.get("/ready")

    payload = response.json()
    assert payload["db_connected"] is True
    assert payload["ready"] is False
    assert "users" in payload["missing_tables"]
    assert "subscriptions" in payload["missing_tables"]


def test_version_and_metrics_endpoints(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        version = client.get("/version")
        client.get("/api/services")
        metrics = client.get("/metrics")

    assert version.status_code == 200
    assert version.json()["app_version"] == config.app_version
    assert version.json()["project"] == config.api_name
    assert metrics.status_code == 200
    assert "api_http_requests_total" in metrics.text


def test_metrics_label_requests_by_route_template(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        client.get("/api/plans")
        missing = client.get("/no-such-page-8d1f")
        metrics = client.get("/metrics")

    assert missing.status_code == 404
    assert 'path="/api/plans"' in metrics.text
    assert 'path="unmatched"' in metrics.text
    assert "no-such-page-8d1f" not in metrics.text
