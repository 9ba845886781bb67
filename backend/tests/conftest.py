"""Shared test configuration and fixtures.

Key principles:
- All HTTP calls go through the local ASGI app via httpx.ASGITransport.
- Upstream LiteAPI traffic is mocked at the HTTP layer with respx.
- AnyIO is the single async runner via pytest-anyio (@pytest.mark.anyio).
"""

from typing import AsyncGenerator

import sys
from pathlib import Path

import pytest
import httpx
from httpx import ASGITransport
from fastapi import FastAPI

# Ensure backend root is on sys.path so that `server` module is importable
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from server import create_app
from hotel_gateway.config import Settings


DATA_BASE_URL = "https://api.liteapi.test/v3.0"
BOOK_BASE_URL = "https://book.liteapi.test/v3.0"
DATA_HOST = "api.liteapi.test"
BOOK_HOST = "book.liteapi.test"
PROD_KEY = "prod_key_123"
SANDBOX_KEY = "sand_key_456"


def make_settings(**overrides) -> Settings:
    values = dict(
        production_api_key=PROD_KEY,
        sandbox_api_key=SANDBOX_KEY,
        app_env="production",
        liteapi_base_url=DATA_BASE_URL,
        liteapi_book_base_url=BOOK_BASE_URL,
        liteapi_timeout_seconds=5.0,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Force pytest-anyio to use asyncio event loop."""

    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app instance."""

    transport = ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test", timeout=30.0) as client:
        yield client


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def app_factory():
    return create_app
