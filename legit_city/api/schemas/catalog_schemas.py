# This file defines schemas for the service catalog and announcements.
# It exists so the rich `/api/*` listings and the older field-reduced listings stay distinct contracts.
# The legacy row models must not grow fields; older clients read them as-is.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from legit_city.api.schemas.common import REQUEST_MODEL_CONFIG


class ServiceCreateRequest(BaseModel):
    model_config = REQUEST_MODEL_CONFIG

    service: str = Field(min_length=1, max_length=255)
    level: str = Field(min_length=1, max_length=100)
    admin_id: int = Field(alias="adminId", gt=0)


class ServiceRow(BaseModel):
    id: int
    service: str
    level: str
    admin_id: int
    admin_name: str | None = None
    created_at: datetime | None = None


class LegacyServiceRow(BaseModel):
    id: int
    service: str
    level: str
    admin_id: int


class ServiceListResponse(BaseModel):
    services: list[ServiceRow]


class AnnouncementCreateRequest(BaseModel):
    model_config = REQUEST_MODEL_CONFIG

    title: str | None = Field(default=None, max_length=255)
    content: str = Field(min_length=1)
    admin_id: int = Field(alias="adminId", gt=0)


class AnnouncementRow(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime | None = None
    admin_name: str | None = None


class LegacyAnnouncementRow(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime | None = None


class AnnouncementListResponse(BaseModel):
    announcements: list[AnnouncementRow]
