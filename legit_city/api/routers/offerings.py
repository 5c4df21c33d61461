# This file defines the service catalog endpoints.
# It exists so admins can publish offerings and everyone can browse them.
# `/services` is the older field-reduced listing kept for existing clients; `/api/services` is the full one.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from legit_city.api.dependencies import get_offering_service
from legit_city.api.schemas.catalog_schemas import (
    LegacyServiceRow,
    ServiceCreateRequest,
    ServiceListResponse,
)
from legit_city.api.schemas.common import MessageResponse
from legit_city.api.services.offering_service import OfferingService

router = APIRouter(tags=["services"])
OfferingServiceDep = Annotated[OfferingService, Depends(get_offering_service)]


@router.post("/api/services", response_model=MessageResponse)
def create_service(payload: ServiceCreateRequest, service: OfferingServiceDep) -> dict[str, object]:
    service.create_service(payload)
    return {"success": True, "message": "Service created"}


@router.get("/api/services", response_model=ServiceListResponse)
def list_services(service: OfferingServiceDep) -> dict[str, object]:
    return {"services": service.list_services()}


@router.get("/services", response_model=list[LegacyServiceRow])
def list_services_legacy(service: OfferingServiceDep) -> list[dict[str, object]]:
    return service.list_services_legacy()
