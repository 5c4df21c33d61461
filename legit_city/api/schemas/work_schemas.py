# This file defines schemas for work uploads and the public work listing.
# Form fields arrive as strings; the request model coerces and checks them in one step.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from legit_city.api.schemas.common import REQUEST_MODEL_CONFIG


class WorkUploadForm(BaseModel):
    model_config = REQUEST_MODEL_CONFIG

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    admin_id: int = Field(alias="adminId", gt=0)


class WorkRow(BaseModel):
    id: int
    title: str
    description: str
    file_path: str | None = None
    created_at: datetime | None = None
    admin_name: str | None = None


class WorkListResponse(BaseModel):
    work: list[WorkRow]
