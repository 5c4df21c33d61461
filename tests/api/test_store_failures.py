# This file tests how endpoints answer when the store cannot be reached.
# Clients get a generic per-operation message; the underlying error stays in the server log.

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from legit_city.api.db_access import DatabaseClient
from tests.api.support import api_test_client, build_test_config


def _unreachable_db(tmp_path: Path) -> DatabaseClient:
    return DatabaseClient(database_url=f"sqlite:///{tmp_path / 'missing-dir' / 'nope.db'}")


def test_listing_reports_generic_error(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config = build_test_config(tmp_path)
    with caplog.at_level(logging.ERROR):
        with api_test_client(config=config, db=_unreachable_db(tmp_path)) as client:
            response = client.get("/api/services")

    assert response.status_code == 500
    payload = response.json()
    assert payload["message"] == "Error fetching services"
    assert payload["error_code"] == "INTERNAL_SERVER_ERROR"
    assert payload["details"] is None
    assert "OperationalError" in caplog.text


def test_write_reports_generic_error(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config, db=_unreachable_db(tmp_path)) as client:
        register = client.post(
            "/register",
            json={"name": "N", "email": "n@example.com", "password": "pw", "accountType": "user"},
        )
        subscribe = client.post("/subscribe", json={"userId": 1, "planId": 2})

    assert register.status_code == 500
    assert register.json()["message"] == "Error registering user"
    assert subscribe.status_code == 500
    assert subscribe.json()["message"] == "Error subscribing"


def test_failed_work_insert_removes_stored_file(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(config=config, db=_unreachable_db(tmp_path)) as client:
        response = client.post(
            "/api/work",
            data={"title": "T", "description": "D", "adminId": "1"},
            files={"file": ("x.txt", b"data", "text/plain")},
        )

    assert response.status_code == 500
    assert response.json()["message"] == "Error uploading work"
    assert list(config.uploads_dir.iterdir()) == []
