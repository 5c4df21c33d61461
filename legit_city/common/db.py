"""
Database engine utilities.
Engines are built explicitly by the caller and handed to whoever needs them; nothing here is global.
"""

from __future__ import annotations

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url


def build_engine(database_url: str, *, pool_size: int = 10) -> Engine:
    """Create an engine with a fixed-size pool whose waiters queue without a timeout."""

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            future=True,
        )

    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=None,
        pool_pre_ping=True,
        future=True,
    )


def test_connection(engine: Engine) -> bool:
    """Return True if the database can be reached and queried."""

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
