from __future__ import annotations

"""Application configuration.

Settings are read once from the process environment at startup and stored
on ``app.state.settings``. Handlers receive them through the
``get_settings`` dependency instead of reading module-level globals.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional
import os

from fastapi import Request


# Application constants
APP_NAME = "Alora Hotel Booking API"
APP_VERSION = "1.0.0"
SERVICE_NAME = "alora-hotel-gateway"
PUBLIC_ENDPOINTS = ["/search-hotels", "/search-rates", "/prebook", "/book"]

DEFAULT_PORT = 3000
DEFAULT_LITEAPI_BASE_URL = "https://api.liteapi.travel/v3.0"
DEFAULT_LITEAPI_BOOK_BASE_URL = "https://book.liteapi.travel/v3.0"
DEFAULT_LITEAPI_TIMEOUT_SECONDS = 30.0


def _env_str(env: Mapping[str, str], name: str, default: str = "") -> str:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip()


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    """Read an integer from environment, falling back to `default` on garbage."""

    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    production_api_key: str = ""
    sandbox_api_key: str = ""
    port: int = DEFAULT_PORT
    app_env: str = "production"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    liteapi_base_url: str = DEFAULT_LITEAPI_BASE_URL
    liteapi_book_base_url: str = DEFAULT_LITEAPI_BOOK_BASE_URL
    liteapi_timeout_seconds: float = DEFAULT_LITEAPI_TIMEOUT_SECONDS
    log_level: str = "INFO"

    @property
    def include_error_details(self) -> bool:
        """Error detail strings are only exposed in development deployments."""

        return self.app_env.lower() == "development"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        origins = [o.strip() for o in _env_str(env, "CORS_ORIGINS", "*").split(",") if o.strip()]
        return cls(
            production_api_key=_env_str(env, "PROD_API_KEY"),
            sandbox_api_key=_env_str(env, "SAND_API_KEY"),
            port=_env_int(env, "PORT", DEFAULT_PORT),
            app_env=_env_str(env, "APP_ENV", "production") or "production",
            cors_origins=origins or ["*"],
            liteapi_base_url=_env_str(env, "LITEAPI_BASE_URL", DEFAULT_LITEAPI_BASE_URL).rstrip("/"),
            liteapi_book_base_url=_env_str(env, "LITEAPI_BOOK_BASE_URL", DEFAULT_LITEAPI_BOOK_BASE_URL).rstrip("/"),
            liteapi_timeout_seconds=_env_float(env, "LITEAPI_TIMEOUT_SECONDS", DEFAULT_LITEAPI_TIMEOUT_SECONDS),
            log_level=_env_str(env, "LOG_LEVEL", "INFO").upper() or "INFO",
        )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
