# This file wraps database access so API services can run parameterized SQL safely.
# It exists to keep SQL execution details out of router code and make testing easier.
# One client owns one pooled engine; the app builds it at startup and injects it into every service.
# Every write runs in its own short transaction.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from legit_city.common.db import build_engine, test_connection


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str, pool_size: int = 10) -> None:
        self._engine: Engine = build_engine(database_url, pool_size=pool_size)

    @property
    def engine(self) -> Engine:
        return self._engine

    def can_connect(self) -> bool:
        return test_connection(self._engine)

    def table_exists(self, table_name: str) -> bool:
        try:
            return inspect(self._engine).has_table(table_name)
        except SQLAlchemyError:
            return False

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def insert(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run one INSERT and return the generated row id."""

        with self._engine.begin() as connection:
            result = connection.execute(text(query), dict(params or {}))
            return int(result.lastrowid)

    def dispose(self) -> None:
        self._engine.dispose()
