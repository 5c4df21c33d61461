# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so acknowledgement and error payloads stay consistent.
# Request models share one config: surrounding whitespace is stripped and camelCase keys are accepted.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

REQUEST_MODEL_CONFIG = ConfigDict(
    populate_by_name=True,
    str_strip_whitespace=True,
    extra="ignore",
)


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime
