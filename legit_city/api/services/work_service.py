# This file implements admin work uploads and the public work listing.
# It exists so file storage and the matching database row are handled together.
# When the row cannot be written, the file stored for it is removed again.

from __future__ import annotations

import logging
from typing import Any, BinaryIO

from legit_city.api.db_access import DatabaseClient
from legit_city.api.error_handlers import APIError, UnexpectedError, store_errors
from legit_city.api.file_store import UploadStore
from legit_city.api.schemas.work_schemas import WorkUploadForm

logger = logging.getLogger(__name__)


class WorkService:
    def __init__(self, *, db: DatabaseClient, store: UploadStore) -> None:
        self.db = db
        self.store = store

    def upload_work(
        self,
        form: WorkUploadForm,
        *,
        file_name: str | None = None,
        stream: BinaryIO | None = None,
    ) -> str | None:
        """Persist an upload and return the stored filename, or None when no file came with it."""

        stored_name: str | None = None
        if file_name and stream is not None:
            try:
                stored_name = self.store.save(file_name, stream)
            except OSError as exc:
                logger.exception("Could not write upload %r", file_name)
                raise UnexpectedError("Error uploading work") from exc

        query = """
        INSERT INTO work (title, description, file_path, admin_id)
        VALUES (:title, :description, :file_path, :admin_id)
        """
        params = {
            "title": form.title,
            "description": form.description,
            "file_path": stored_name,
            "admin_id": form.admin_id,
        }
        try:
            with store_errors("Error uploading work"):
                self.db.insert(query, params)
        except APIError:
            if stored_name is not None:
                self.store.path_for(stored_name).unlink(missing_ok=True)
            raise

        logger.info("Stored work for admin_id=%s file=%s", form.admin_id, stored_name)
        return stored_name

    def list_work(self) -> list[dict[str, Any]]:
        query = """
        SELECT w.id, w.title, w.description, w.file_path, w.created_at, u.name AS admin_name
        FROM work w
        LEFT JOIN users u ON w.admin_id = u.id
        ORDER BY w.created_at DESC, w.id DESC
        """
        with store_errors("Error fetching work"):
            return self.db.fetch_all(query)
