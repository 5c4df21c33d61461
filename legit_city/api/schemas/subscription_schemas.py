# This file defines the subscribe request and the single target it resolves to.
# A subscription points at either a service or a plan, never both.

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from legit_city.api.schemas.common import REQUEST_MODEL_CONFIG

TargetKind = Literal["service", "plan"]


class SubscriptionTarget(BaseModel):
    kind: TargetKind
    target_id: int


class SubscribeRequest(BaseModel):
    model_config = REQUEST_MODEL_CONFIG

    user_id: int = Field(alias="userId", gt=0)
    service_id: int | None = Field(default=None, alias="serviceId", gt=0)
    plan_id: int | None = Field(default=None, alias="planId", gt=0)

    @model_validator(mode="after")
    def require_a_target(self) -> "SubscribeRequest":
        if self.service_id is None and self.plan_id is None:
            raise ValueError("serviceId or planId is required")
        return self

    @property
    def has_both_targets(self) -> bool:
        return self.service_id is not None and self.plan_id is not None

    def resolve_target(self) -> SubscriptionTarget:
        """Pick the subscription target. A service reference wins over a plan reference."""

        if self.service_id is not None:
            return SubscriptionTarget(kind="service", target_id=self.service_id)
        if self.plan_id is not None:
            return SubscriptionTarget(kind="plan", target_id=self.plan_id)
        raise ValueError("serviceId or planId is required")
