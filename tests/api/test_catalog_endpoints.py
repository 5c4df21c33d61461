# This file tests the service catalog and announcement endpoints.
# It exists to protect both the rich `/api/*` listings and the legacy field-reduced listings.
# Repeated reads without writes must return identical, newest-first results.

from __future__ import annotations

from pathlib import Path

from tests.api.support import api_test_client, build_test_config, register_user


def test_services_rich_and_legacy_projections(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        register_user(client, name="Ada Admin")
        first = client.post("/api/services", json={"service": "Plumbing", "level": "basic", "adminId": 1})
        client.post("/api/services", json={"service": "Roofing", "level": "premium", "adminId": 1})
        rich = client.get("/api/services")
        legacy = client.get("/services")

    assert first.status_code == 200
    assert first.json() == {"success": True, "message": "Service created"}

    services = rich.json()["services"]
    assert [row["service"] for row in services] == ["Roofing", "Plumbing"]
    assert services[0]["admin_name"] == "Ada Admin"
    assert services[0]["level"] == "premium"
    assert services[0]["created_at"]

    assert legacy.json() == [
        {"id": 2, "service": "Roofing", "level": "premium", "admin_id": 1},
        {"id": 1, "service": "Plumbing", "level": "basic", "admin_id": 1},
    ]


def test_create_service_requires_every_field(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        response = client.post("/api/services", json={"service": "Plumbing", "adminId": 1})

    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_announcement_title_defaults_to_empty(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        created = client.post("/api/announcements", json={"content": "Water off Monday", "adminId": 7})
        client.post(
            "/api/announcements",
            json={"title": "Festival", "content": "Saturday in the park", "adminId": 7},
        )
        rich = client.get("/api/announcements")
        legacy = client.get("/announcements")

    assert created.status_code == 200
    assert created.json()["message"] == "Announcement created"

    announcements = rich.json()["announcements"]
    assert [row["title"] for row in announcements] == ["Festival", ""]
    assert announcements[1]["content"] == "Water off Monday"
    assert announcements[1]["admin_name"] is None

    legacy_rows = legacy.json()
    assert [row["id"] for row in legacy_rows] == [2, 1]
    assert set(legacy_rows[0]) == {"id", "title", "content", "created_at"}


def test_announcement_requires_content_and_admin(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        no_content = client.post("/api/announcements", json={"title": "Hi", "adminId": 1})
        no_admin = client.post("/api/announcements", json={"content": "Hello"})

    assert no_content.status_code == 400
    assert no_admin.status_code == 400


def test_listings_are_stable_between_reads(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config) as client:
        for index in range(3):
            client.post("/api/services", json={"service": f"S{index}", "level": "basic", "adminId": 1})
            client.post("/api/announcements", json={"content": f"A{index}", "adminId": 1})
            client.post(
                "/api/work",
                data={"title": f"W{index}", "description": "d", "adminId": "1"},
            )

        for path in ("/api/services", "/api/announcements", "/api/work"):
            assert client.get(path).json() == client.get(path).json()
