# This script creates the portal tables in the configured database.
# It exists so a fresh MySQL (or SQLite) database can be prepared before the API starts.
# Existing tables are left untouched, so reruns are safe.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from legit_city.common.db import build_engine, test_connection
from legit_city.common.logging import configure_logging
from legit_city.common.schema import TABLE_NAMES, create_schema
from legit_city.common.settings import get_settings

logger = logging.getLogger("init_db")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create Legit City tables.")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL; defaults to DATABASE_URL or the DB_* settings.",
    )
    args = parser.parse_args(argv)

    configure_logging()
    database_url = args.database_url or get_settings().database_url
    engine = build_engine(database_url)
    try:
        if not test_connection(engine):
            logger.error("Cannot reach database at %s", engine.url.render_as_string(hide_password=True))
            return 1
        create_schema(engine)
    finally:
        engine.dispose()

    logger.info("Schema ready: %s", ", ".join(TABLE_NAMES))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
