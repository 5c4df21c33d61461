# This file defines plan endpoints: admin creation and the currency-aware public listing.
# It exists so clients can read plan prices in their own currency from one call.
# Unknown or unreachable currencies never fail the listing; the rate simply falls back to 1.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from legit_city.api.dependencies import get_plan_service
from legit_city.api.schemas.plan_schemas import (
    PlanCreatedResponse,
    PlanCreateRequest,
    PlanListResponse,
)
from legit_city.api.services.plan_service import PlanService

router = APIRouter(prefix="/api/plans", tags=["plans"])
PlanServiceDep = Annotated[PlanService, Depends(get_plan_service)]


@router.post("", response_model=PlanCreatedResponse)
def create_plan(payload: PlanCreateRequest, service: PlanServiceDep) -> dict[str, object]:
    plan_id = service.create_plan(payload)
    return {"success": True, "message": "Plan created", "planId": plan_id}


@router.get("", response_model=PlanListResponse)
def list_plans(
    service: PlanServiceDep,
    currency: str | None = Query(default=None),
) -> dict[str, object]:
    return service.list_plans(currency=currency)
