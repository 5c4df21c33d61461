# This file implements the service catalog: admins create offerings, everyone lists them.
# It exists so routers can return catalog rows without embedding SQL directly.
# Two listings exist: the rich one joins the owning admin's name, the legacy one does not.

from __future__ import annotations

from typing import Any

from legit_city.api.db_access import DatabaseClient
from legit_city.api.error_handlers import store_errors
from legit_city.api.schemas.catalog_schemas import ServiceCreateRequest


class OfferingService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_service(self, request: ServiceCreateRequest) -> int:
        query = """
        INSERT INTO services (service, level, admin_id)
        VALUES (:service, :level, :admin_id)
        """
        params = {
            "service": request.service,
            "level": request.level,
            "admin_id": request.admin_id,
        }
        with store_errors("Error creating service"):
            return self.db.insert(query, params)

    def list_services(self) -> list[dict[str, Any]]:
        query = """
        SELECT s.id, s.service, s.level, s.admin_id, u.name AS admin_name, s.created_at
        FROM services s
        LEFT JOIN users u ON s.admin_id = u.id
        ORDER BY s.created_at DESC, s.id DESC
        """
        with store_errors("Error fetching services"):
            return self.db.fetch_all(query)

    def list_services_legacy(self) -> list[dict[str, Any]]:
        query = """
        SELECT id, service, level, admin_id
        FROM services
        ORDER BY created_at DESC, id DESC
        """
        with store_errors("Error fetching services"):
            return self.db.fetch_all(query)
