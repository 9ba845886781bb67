from __future__ import annotations

from enum import Enum
from typing import Optional

from hotel_gateway.config import Settings
from hotel_gateway.errors import ConfigurationError


class Environment(str, Enum):
    PRODUCTION = "production"
    SANDBOX = "sandbox"


def normalize_environment(tag: Optional[str]) -> Environment:
    """Only the exact tag "sandbox" selects the sandbox; everything else is production."""

    if tag == Environment.SANDBOX.value:
        return Environment.SANDBOX
    return Environment.PRODUCTION


def resolve_api_key(settings: Settings, environment: Optional[str]) -> str:
    env = normalize_environment(environment)
    api_key = settings.sandbox_api_key if env is Environment.SANDBOX else settings.production_api_key
    if not api_key:
        raise ConfigurationError(environment=env.value)
    return api_key
