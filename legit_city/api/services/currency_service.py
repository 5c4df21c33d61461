# This file implements the exchange-rate lookup used to localize plan prices.
# It exists so the remote call and its fallback policy live in one small client.
# Any failure (transport, status, payload) logs a warning and yields the neutral rate 1.0.
# Callers never see an exception from this client.

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

NEUTRAL_RATE = 1.0


class CurrencyRateClient:
    def __init__(
        self,
        *,
        base_currency: str = "USD",
        rates_url: str = "https://api.exchangerate.host/latest",
        timeout_seconds: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_currency = base_currency.upper()
        self.rates_url = rates_url
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get_rate(self, target_currency: str | None) -> float:
        """Return how many units of ``target_currency`` one unit of the base currency buys."""

        if not target_currency or target_currency.upper() == self.base_currency:
            return NEUTRAL_RATE

        target = target_currency.upper()
        try:
            payload = self._request_rates(target)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Exchange rate lookup failed for %s, defaulting rate=1: %s", target, exc)
            return NEUTRAL_RATE

        rate = _extract_rate(payload, target)
        if rate is None:
            logger.warning("Exchange rate for %s missing from response, defaulting rate=1", target)
            return NEUTRAL_RATE
        return rate

    def _request_rates(self, target: str) -> Any:
        response = self.session.get(
            self.rates_url,
            params={"base": self.base_currency, "symbols": target},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()


def _extract_rate(payload: Any, target: str) -> float | None:
    if not isinstance(payload, dict):
        return None
    rates = payload.get("rates")
    if not isinstance(rates, dict):
        return None
    try:
        rate = float(rates.get(target))
    except (TypeError, ValueError):
        return None
    return rate if rate > 0 else None
