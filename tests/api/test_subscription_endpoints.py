# This file tests the subscribe endpoint and the single row it writes per call.

from __future__ import annotations

from pathlib import Path

from tests.api.support import api_test_client, build_database, build_test_config

SUBSCRIPTION_ROWS = "SELECT user_id, service_id, plan_id FROM subscriptions ORDER BY id"


def test_service_wins_when_both_targets_given(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    db = build_database(config)
    with api_test_client(config=config, db=db) as client:
        response = client.post("/subscribe", json={"userId": 5, "serviceId": 2, "planId": 9})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Subscribed to service"}
    assert db.fetch_all(SUBSCRIPTION_ROWS) == [{"user_id": 5, "service_id": 2, "plan_id": None}]


def test_plan_subscription(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    db = build_database(config)
    with api_test_client(config=config, db=db) as client:
        response = client.post("/subscribe", json={"userId": 5, "planId": 9})

    assert response.status_code == 200
    assert response.json()["message"] == "Subscribed to plan"
    assert db.fetch_all(SUBSCRIPTION_ROWS) == [{"user_id": 5, "service_id": None, "plan_id": 9}]


def test_subscribe_requires_user_and_a_target(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    db = build_database(config)
    with api_test_client(config=config, db=db) as client:
        no_target = client.post("/subscribe", json={"userId": 5})
        no_user = client.post("/subscribe", json={"serviceId": 2})

    assert no_target.status_code == 400
    assert no_user.status_code == 400
    assert db.fetch_all(SUBSCRIPTION_ROWS) == []


def test_strict_mode_rejects_both_targets(tmp_path: Path) -> None:
    config = build_test_config(tmp_path, strict_subscription_target=True)
    db = build_database(config)
    with api_test_client(config=config, db=db) as client:
        response = client.post("/subscribe", json={"userId": 5, "serviceId": 2, "planId": 9})

    assert response.status_code == 400
    assert response.json()["message"] == "Provide either serviceId or planId, not both"
    assert db.fetch_all(SUBSCRIPTION_ROWS) == []
