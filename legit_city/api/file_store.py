# This file stores uploaded work artifacts on disk under generated names.
# It exists so upload naming and collision handling live outside the request handlers.
# Names combine the ingestion time in milliseconds with the client filename, whitespace replaced by underscores.
# Only the generated name is returned; callers persist that, never a full path.

from __future__ import annotations

import logging
import re
import secrets
import shutil
import time
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_FALLBACK_NAME = "upload"


def sanitize_filename(original_name: str) -> str:
    """Strip directory parts from a client filename and collapse whitespace runs to `_`."""

    base_name = Path(original_name.replace("\\", "/")).name
    cleaned = _WHITESPACE_RE.sub("_", base_name)
    if cleaned in {"", ".", ".."}:
        return _FALLBACK_NAME
    return cleaned


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class UploadStore:
    """Disk-backed store for uploaded files."""

    def __init__(self, root: Path, *, clock: Callable[[], int] = _epoch_millis) -> None:
        self.root = Path(root)
        self._clock = clock

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def generate_name(self, original_name: str) -> str:
        return f"{self._clock()}-{sanitize_filename(original_name)}"

    def save(self, original_name: str, stream: BinaryIO) -> str:
        """Copy ``stream`` into the store and return the generated filename."""

        self.ensure_root()
        stored_name = self.generate_name(original_name)
        try:
            self._write_new(stored_name, stream)
        except FileExistsError:
            timestamp, _, rest = stored_name.partition("-")
            stored_name = f"{timestamp}-{secrets.token_hex(4)}-{rest}"
            logger.info("Upload name collision, storing as %s", stored_name)
            self._write_new(stored_name, stream)
        return stored_name

    def path_for(self, stored_name: str) -> Path:
        return self.root / stored_name

    def _write_new(self, stored_name: str, stream: BinaryIO) -> None:
        with open(self.path_for(stored_name), "xb") as handle:
            shutil.copyfileobj(stream, handle)
