from __future__ import annotations

import pytest
import respx
from fastapi import status
from httpx import ASGITransport, AsyncClient

from conftest import BOOK_HOST, DATA_HOST, PROD_KEY, SANDBOX_KEY, make_settings
from hotel_gateway.config import Settings
from hotel_gateway.errors import ConfigurationError
from hotel_gateway.services.credentials import Environment, normalize_environment, resolve_api_key


@pytest.mark.parametrize("tag", [None, "", "production", "prod", "Sandbox", "SANDBOX", "staging"])
def test_anything_but_exact_sandbox_selects_production(tag) -> None:
    assert normalize_environment(tag) is Environment.PRODUCTION
    assert resolve_api_key(make_settings(), tag) == PROD_KEY


def test_sandbox_selects_sandbox_key() -> None:
    assert normalize_environment("sandbox") is Environment.SANDBOX
    assert resolve_api_key(make_settings(), "sandbox") == SANDBOX_KEY


def test_missing_key_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_api_key(make_settings(sandbox_api_key=""), "sandbox")
    err = exc_info.value
    assert err.status_code == 500
    assert err.environment == "sandbox"
    assert err.to_dict(include_details=True) == {"error": "API key not configured"}


def test_settings_from_env_reads_credentials_and_defaults() -> None:
    settings = Settings.from_env(
        {
            "PROD_API_KEY": " prod ",
            "SAND_API_KEY": "sand",
            "PORT": "not-a-port",
            "LITEAPI_BASE_URL": "https://example.test/v3.0/",
        }
    )
    assert settings.production_api_key == "prod"
    assert settings.sandbox_api_key == "sand"
    assert settings.port == 3000
    assert settings.app_env == "production"
    assert settings.include_error_details is False
    assert settings.cors_origins == ["*"]
    assert settings.liteapi_base_url == "https://example.test/v3.0"


def test_settings_development_mode_exposes_details() -> None:
    settings = Settings.from_env({"APP_ENV": "development", "PORT": "8080", "CORS_ORIGINS": "https://a.test, https://b.test"})
    assert settings.include_error_details is True
    assert settings.port == 8080
    assert settings.cors_origins == ["https://a.test", "https://b.test"]


@pytest.mark.anyio
@pytest.mark.parametrize(
    "method,path,kwargs",
    [
        ("GET", "/search-hotels", {"params": {"checkin": "2026-03-10", "checkout": "2026-03-12", "adults": "1", "city": "Porto", "countryCode": "PT"}}),
        ("GET", "/search-rates", {"params": {"checkin": "2026-03-10", "checkout": "2026-03-12", "adults": "1", "hotelId": "lp1"}}),
        ("POST", "/prebook", {"json": {"rateId": "OFFER-1"}}),
        ("GET", "/book", {"params": {"prebookId": "PB", "guestFirstName": "A", "guestLastName": "B", "guestEmail": "a@b.test", "transactionId": "t"}}),
    ],
)
async def test_missing_credential_fails_before_any_upstream_call(app_factory, method, path, kwargs) -> None:
    app = app_factory(make_settings(production_api_key=""))
    transport = ASGITransport(app=app)

    with respx.mock(assert_all_called=False) as router:
        data_route = router.route(host=DATA_HOST)
        book_route = router.route(host=BOOK_HOST)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.request(method, path, **kwargs)

    assert resp.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert resp.json() == {"error": "API key not configured"}
    assert not data_route.called
    assert not book_route.called
