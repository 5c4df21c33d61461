# This file implements plan creation and the localized plan catalog.
# It exists so routers can return priced plans without embedding SQL or conversion math.
# Prices are stored in the base currency and converted per request with a fresh rate lookup.

from __future__ import annotations

import logging
import re
from typing import Any

from legit_city.api.api_config import ApiConfig
from legit_city.api.db_access import DatabaseClient
from legit_city.api.error_handlers import InvalidRequestError, store_errors
from legit_city.api.schemas.plan_schemas import PlanCreateRequest
from legit_city.api.services.currency_service import CurrencyRateClient

logger = logging.getLogger(__name__)

_CURRENCY_RE = re.compile(r"[A-Za-z]{3}")


def localize_price(price_usd: float, rate: float) -> float:
    return round(price_usd * rate, 2)


class PlanService:
    """Data access for plan endpoints."""

    def __init__(
        self,
        *,
        config: ApiConfig,
        db: DatabaseClient,
        rates: CurrencyRateClient,
    ) -> None:
        self.config = config
        self.db = db
        self.rates = rates

    def create_plan(self, request: PlanCreateRequest) -> int:
        query = """
        INSERT INTO plans (admin_id, name, description, price_usd, duration_days, active)
        VALUES (:admin_id, :name, :description, :price_usd, :duration_days, 1)
        """
        params = {
            "admin_id": request.admin_id,
            "name": request.name,
            "description": request.description or "",
            "price_usd": request.price,
            "duration_days": request.duration,
        }
        with store_errors("Error creating plan"):
            plan_id = self.db.insert(query, params)
        logger.info("Created plan id=%s admin_id=%s", plan_id, request.admin_id)
        return plan_id

    def list_plans(self, *, currency: str | None) -> dict[str, Any]:
        resolved_currency = self._resolve_currency(currency)
        query = """
        SELECT
            p.id,
            p.admin_id,
            u.name AS admin_name,
            p.name,
            p.description,
            p.price_usd,
            p.duration_days,
            p.created_at
        FROM plans p
        LEFT JOIN users u ON p.admin_id = u.id
        WHERE p.active = 1
        ORDER BY p.created_at DESC, p.id DESC
        """
        with store_errors("Error fetching plans"):
            rows = self.db.fetch_all(query)

        rate = self.rates.get_rate(resolved_currency)
        plans = []
        for row in rows:
            price_usd = float(row["price_usd"])
            plans.append(
                {
                    "id": row["id"],
                    "admin_id": row["admin_id"],
                    "admin_name": row["admin_name"],
                    "name": row["name"],
                    "description": row["description"],
                    "price_usd": price_usd,
                    "duration_days": row["duration_days"],
                    "currency": resolved_currency,
                    "price_local": localize_price(price_usd, rate),
                    "created_at": row["created_at"],
                }
            )

        return {
            "plans": plans,
            "base": self.config.base_currency,
            "currency": resolved_currency,
            "rate": rate,
        }

    def _resolve_currency(self, currency: str | None) -> str:
        requested = (currency or "").strip()
        if not requested:
            return self.config.base_currency
        if not _CURRENCY_RE.fullmatch(requested):
            raise InvalidRequestError(
                "currency must be a 3-letter code",
                details=[{"field": "currency", "message": "Expected 3 letters", "type": "value_error"}],
            )
        return requested.upper()
