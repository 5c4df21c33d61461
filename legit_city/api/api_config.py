# This file defines runtime settings for the API layer in one place.
# It exists so store, currency, upload, and static-page behavior can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# Database location and listen port come from the shared settings module.

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from legit_city.common.settings import get_settings

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
_PROJECT_ROOT = Path(__file__).resolve().parents[2]


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Legit City API"
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "local"
    database_url: str
    db_pool_size: int = 10
    base_currency: str = "USD"
    exchange_rate_url: str = "https://api.exchangerate.host/latest"
    exchange_rate_timeout_seconds: float = 10.0
    uploads_dir: Path = _PROJECT_ROOT / "uploads"
    public_dir: Path = _PROJECT_ROOT / "public"
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    enable_request_logging: bool = False
    strict_subscription_target: bool = False
    password_hash_rounds: int = 10
    app_version: str = "0.1.0"

    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not _CURRENCY_RE.match(normalized):
            raise ValueError(f"base_currency must be a 3-letter code, got {value!r}")
        return normalized

    @field_validator("db_pool_size", "port")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @field_validator("exchange_rate_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("exchange_rate_timeout_seconds must be greater than 0.")
        return value

    @field_validator("password_hash_rounds")
    @classmethod
    def validate_rounds(cls, value: int) -> int:
        # bcrypt accepts cost factors 4..31
        if not 4 <= value <= 31:
            raise ValueError("password_hash_rounds must be between 4 and 31.")
        return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip())


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    settings = get_settings()
    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Legit City API"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": settings.PORT,
        "environment": settings.ENV,
        "database_url": settings.database_url,
        "db_pool_size": _env_int("API_DB_POOL_SIZE", 10),
        "base_currency": os.getenv("API_BASE_CURRENCY", "USD"),
        "exchange_rate_url": os.getenv(
            "API_EXCHANGE_RATE_URL", "https://api.exchangerate.host/latest"
        ),
        "exchange_rate_timeout_seconds": _env_float("API_EXCHANGE_RATE_TIMEOUT_SECONDS", 10.0),
        "uploads_dir": _env_path("API_UPLOADS_DIR", _PROJECT_ROOT / "uploads"),
        "public_dir": _env_path("API_PUBLIC_DIR", _PROJECT_ROOT / "public"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", ["*"]),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", False),
        "strict_subscription_target": _env_bool("API_STRICT_SUBSCRIPTION_TARGET", False),
        "password_hash_rounds": _env_int("API_PASSWORD_HASH_ROUNDS", 10),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
