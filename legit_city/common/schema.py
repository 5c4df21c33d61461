"""Table definitions for the portal store and a helper that creates them."""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.engine import Engine

metadata = MetaData()


def _created_at() -> Column:
    return Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp())


users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
    Column("account_type", String(50), nullable=False),
    Column("verified", Integer, nullable=False, server_default=text("0")),
    Column("subscription_expires_at", DateTime, nullable=True),
    _created_at(),
)

plans = Table(
    "plans",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("admin_id", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column("price_usd", Numeric(10, 2), nullable=False),
    Column("duration_days", Integer, nullable=False),
    Column("active", Integer, nullable=False, server_default=text("1")),
    _created_at(),
)

services = Table(
    "services",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("service", String(255), nullable=False),
    Column("level", String(100), nullable=False),
    Column("admin_id", Integer, nullable=False),
    _created_at(),
)

announcements = Table(
    "announcements",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False, server_default=""),
    Column("content", Text, nullable=False),
    Column("admin_id", Integer, nullable=False),
    _created_at(),
)

work = Table(
    "work",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column("file_path", String(512), nullable=True),
    Column("admin_id", Integer, nullable=False),
    _created_at(),
)

subscriptions = Table(
    "subscriptions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column("service_id", Integer, nullable=True),
    Column("plan_id", Integer, nullable=True),
    _created_at(),
)

TABLE_NAMES: tuple[str, ...] = tuple(metadata.tables)


def create_schema(engine: Engine) -> None:
    """Create any missing portal tables. Existing tables are left untouched."""

    metadata.create_all(engine, checkfirst=True)
