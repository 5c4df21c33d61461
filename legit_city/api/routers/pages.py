# This file serves the static front-end pages (home and the two dashboards).
# The pages live in the configured public directory; everything else there is mounted as static assets.

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import FileResponse

from legit_city.api.api_config import ApiConfig
from legit_city.api.dependencies import ConfigDep
from legit_city.api.error_handlers import APIError

router = APIRouter(tags=["pages"], include_in_schema=False)


def _page(config: ApiConfig, file_name: str) -> FileResponse:
    path = config.public_dir / file_name
    if not path.is_file():
        raise APIError(status_code=404, error_code="PAGE_NOT_FOUND", message=f"{file_name} not found")
    return FileResponse(path, media_type="text/html")


@router.get("/")
def home(config: ConfigDep) -> FileResponse:
    return _page(config, "index.html")


@router.get("/admin-dashboard")
def admin_dashboard(config: ConfigDep) -> FileResponse:
    return _page(config, "admin-dashboard.html")


@router.get("/user-dashboard")
def user_dashboard(config: ConfigDep) -> FileResponse:
    return _page(config, "user-dashboard.html")
