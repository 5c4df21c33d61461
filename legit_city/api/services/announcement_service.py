"""Announcement creation and listings (rich and legacy)."""

from __future__ import annotations

from typing import Any

from legit_city.api.db_access import DatabaseClient
from legit_city.api.error_handlers import store_errors
from legit_city.api.schemas.catalog_schemas import AnnouncementCreateRequest


class AnnouncementService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_announcement(self, request: AnnouncementCreateRequest) -> int:
        query = """
        INSERT INTO announcements (title, content, admin_id)
        VALUES (:title, :content, :admin_id)
        """
        params = {
            "title": request.title or "",
            "content": request.content,
            "admin_id": request.admin_id,
        }
        with store_errors("Error creating announcement"):
            return self.db.insert(query, params)

    def list_announcements(self) -> list[dict[str, Any]]:
        query = """
        SELECT a.id, a.title, a.content, a.created_at, u.name AS admin_name
        FROM announcements a
        LEFT JOIN users u ON a.admin_id = u.id
        ORDER BY a.created_at DESC, a.id DESC
        """
        with store_errors("Error fetching announcements"):
            return self.db.fetch_all(query)

    def list_announcements_legacy(self) -> list[dict[str, Any]]:
        query = """
        SELECT id, title, content, created_at
        FROM announcements
        ORDER BY created_at DESC, id DESC
        """
        with store_errors("Error fetching announcements"):
            return self.db.fetch_all(query)
