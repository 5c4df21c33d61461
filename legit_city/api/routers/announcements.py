# This file defines announcement endpoints, with the same rich/legacy listing split as services.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from legit_city.api.dependencies import get_announcement_service
from legit_city.api.schemas.catalog_schemas import (
    AnnouncementCreateRequest,
    AnnouncementListResponse,
    LegacyAnnouncementRow,
)
from legit_city.api.schemas.common import MessageResponse
from legit_city.api.services.announcement_service import AnnouncementService

router = APIRouter(tags=["announcements"])
AnnouncementServiceDep = Annotated[AnnouncementService, Depends(get_announcement_service)]


@router.post("/api/announcements", response_model=MessageResponse)
def create_announcement(
    payload: AnnouncementCreateRequest, service: AnnouncementServiceDep
) -> dict[str, object]:
    service.create_announcement(payload)
    return {"success": True, "message": "Announcement created"}


@router.get("/api/announcements", response_model=AnnouncementListResponse)
def list_announcements(service: AnnouncementServiceDep) -> dict[str, object]:
    return {"announcements": service.list_announcements()}


@router.get("/announcements", response_model=list[LegacyAnnouncementRow])
def list_announcements_legacy(service: AnnouncementServiceDep) -> list[dict[str, object]]:
    return service.list_announcements_legacy()
