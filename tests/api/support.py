# This file provides shared helpers for API endpoint tests.
# It exists so tests run against a throwaway SQLite store and a fake rate service instead of MySQL and the internet.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import requests
from fastapi.testclient import TestClient

from legit_city.api.api_config import ApiConfig
from legit_city.api.app import create_app
from legit_city.api.db_access import DatabaseClient
from legit_city.api.file_store import UploadStore
from legit_city.api.services.currency_service import CurrencyRateClient
from legit_city.common.schema import create_schema

TEST_RATES_URL = "http://rates.test/latest"


def build_test_config(tmp_path: Path, **overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Legit City API",
        "environment": "test",
        "database_url": f"sqlite:///{tmp_path / 'legit_city.db'}",
        "db_pool_size": 2,
        "base_currency": "USD",
        "exchange_rate_url": TEST_RATES_URL,
        "exchange_rate_timeout_seconds": 1.0,
        "uploads_dir": tmp_path / "uploads",
        "public_dir": tmp_path / "public",
        "allowed_origins": [],
        "password_hash_rounds": 4,
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig(**values)


def build_database(config: ApiConfig, *, with_schema: bool = True) -> DatabaseClient:
    db = DatabaseClient(database_url=config.database_url, pool_size=config.db_pool_size)
    if with_schema:
        create_schema(db.engine)
    return db


class FakeRatesResponse:
    def __init__(self, *, status_code: int = 200, payload: Any = None, bad_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


class FakeRatesSession:
    """Stands in for `requests.Session` in rate lookups."""

    def __init__(
        self,
        *,
        rates: dict[str, float] | None = None,
        response: FakeRatesResponse | None = None,
        raise_error: Exception | None = None,
    ) -> None:
        self.rates = rates or {}
        self.response = response
        self.raise_error = raise_error
        self.calls: list[tuple[str, dict[str, Any] | None, float]] = []

    def get(self, url: str, params: dict[str, Any] | None = None, timeout: float = 0) -> FakeRatesResponse:
        self.calls.append((url, params, timeout))
        if self.raise_error is not None:
            raise self.raise_error
        if self.response is not None:
            return self.response
        return FakeRatesResponse(payload={"base": "USD", "rates": dict(self.rates)})


def build_rate_client(config: ApiConfig, session: FakeRatesSession) -> CurrencyRateClient:
    return CurrencyRateClient(
        base_currency=config.base_currency,
        rates_url=config.exchange_rate_url,
        timeout_seconds=config.exchange_rate_timeout_seconds,
        session=session,  # type: ignore[arg-type]
    )


@contextmanager
def api_test_client(
    *,
    config: ApiConfig,
    db: DatabaseClient | None = None,
    rates_session: FakeRatesSession | None = None,
    uploads: UploadStore | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient for an app wired to test doubles."""

    resolved_db = db or build_database(config)
    app = create_app(
        config=config,
        db=resolved_db,
        rates=build_rate_client(config, rates_session or FakeRatesSession()),
        uploads=uploads,
    )
    with TestClient(app) as client:
        yield client


def register_user(
    client: TestClient,
    *,
    name: str = "Ada Admin",
    email: str = "ada@example.com",
    password: str = "s3cret!pass",
    account_type: str = "admin",
) -> None:
    response = client.post(
        "/register",
        json={"name": name, "email": email, "password": password, "accountType": account_type},
    )
    assert response.status_code == 201, response.text
