# This file defines the subscribe endpoint.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from legit_city.api.dependencies import get_subscription_service
from legit_city.api.schemas.common import MessageResponse
from legit_city.api.schemas.subscription_schemas import SubscribeRequest
from legit_city.api.services.subscription_service import SubscriptionService

router = APIRouter(tags=["subscriptions"])
SubscriptionServiceDep = Annotated[SubscriptionService, Depends(get_subscription_service)]


@router.post("/subscribe", response_model=MessageResponse)
def subscribe(payload: SubscribeRequest, service: SubscriptionServiceDep) -> dict[str, object]:
    target = service.subscribe(payload)
    return {"success": True, "message": f"Subscribed to {target.kind}"}
