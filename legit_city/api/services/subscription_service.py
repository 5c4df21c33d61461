# This file records user subscriptions to a service or a plan.
# It exists so target resolution (service wins over plan) lives next to the insert it drives.
# No payment is taken here, whatever the plan costs.

from __future__ import annotations

import logging

from legit_city.api.api_config import ApiConfig
from legit_city.api.db_access import DatabaseClient
from legit_city.api.error_handlers import InvalidRequestError, store_errors
from legit_city.api.schemas.subscription_schemas import SubscribeRequest, SubscriptionTarget

logger = logging.getLogger(__name__)

_INSERT_BY_KIND = {
    "service": "INSERT INTO subscriptions (user_id, service_id) VALUES (:user_id, :target_id)",
    "plan": "INSERT INTO subscriptions (user_id, plan_id) VALUES (:user_id, :target_id)",
}


class SubscriptionService:
    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db

    def subscribe(self, request: SubscribeRequest) -> SubscriptionTarget:
        if request.has_both_targets:
            if self.config.strict_subscription_target:
                raise InvalidRequestError("Provide either serviceId or planId, not both")
            logger.warning(
                "Subscription for user_id=%s named both service_id=%s and plan_id=%s; plan ignored",
                request.user_id,
                request.service_id,
                request.plan_id,
            )

        target = request.resolve_target()
        with store_errors("Error subscribing"):
            self.db.insert(
                _INSERT_BY_KIND[target.kind],
                {"user_id": request.user_id, "target_id": target.target_id},
            )
        return target
