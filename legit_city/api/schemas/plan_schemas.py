# This file defines plan endpoint schemas for creation requests and localized listings.
# It exists so price conversion output (rate, base, local price) has an explicit contract.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from legit_city.api.schemas.common import REQUEST_MODEL_CONFIG


class PlanCreateRequest(BaseModel):
    model_config = REQUEST_MODEL_CONFIG

    admin_id: int = Field(alias="adminId", gt=0)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(gt=0)
    duration: int = Field(gt=0)


class PlanCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    plan_id: int = Field(alias="planId")


class PlanRow(BaseModel):
    id: int
    admin_id: int
    admin_name: str | None = None
    name: str
    description: str | None = None
    price_usd: float
    duration_days: int
    currency: str
    price_local: float
    created_at: datetime | None = None


class PlanListResponse(BaseModel):
    plans: list[PlanRow]
    base: str
    currency: str
    rate: float
