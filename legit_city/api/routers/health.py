# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity and that every portal table exists.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from legit_city.api.dependencies import ConfigDep, DBDep
from legit_city.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse
from legit_city.common.schema import TABLE_NAMES

router = APIRouter(tags=["health"])


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
        value = completed.stdout.strip()
        return value or None
    except (OSError, subprocess.SubprocessError):
        return None


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(request: Request, db: DBDep) -> dict[str, object]:
    db_connected = db.can_connect()
    missing_tables = [name for name in TABLE_NAMES if not (db_connected and db.table_exists(name))]

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "missing_tables": missing_tables,
        "ready": db_connected and not missing_tables,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
