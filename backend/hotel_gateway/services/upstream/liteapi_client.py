from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import httpx

from hotel_gateway.config import Settings
from hotel_gateway.errors import UpstreamCallError
from hotel_gateway.services.upstream.envelope import UpstreamReply

logger = logging.getLogger(__name__)


class LiteApiClient:
    """Thin HTTP client for the LiteAPI v3 hotel distribution API.

    - Hotel data and rates live on the data host, prebook/book on the
      booking host
    - Knows nothing about gateway endpoints; error mapping to HTTP
      responses is left to the services
    - 4xx bodies are returned as-is (they carry an ``error`` object),
      transport failures and 5xx raise UpstreamCallError
    """

    def __init__(self, api_key: str, settings: Settings) -> None:
        self.api_key = api_key
        self.base_url = settings.liteapi_base_url.rstrip("/")
        self.book_base_url = settings.liteapi_book_base_url.rstrip("/")
        self.timeout = float(settings.liteapi_timeout_seconds or 30.0)

    def _headers(self) -> Dict[str, str]:
        return {
            "X-API-Key": self.api_key,
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> UpstreamReply:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.request(method, url, params=params, json=json, headers=self._headers())
        except httpx.HTTPError as exc:
            raise UpstreamCallError(details=f"{method} {url}: {exc!r}") from exc

        if resp.status_code >= 500:
            raise UpstreamCallError(
                details=f"{method} {url} returned HTTP {resp.status_code}",
                upstream_status=resp.status_code,
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise UpstreamCallError(
                details=f"{method} {url} returned a non-JSON body",
                upstream_status=resp.status_code,
            ) from exc

        if resp.status_code >= 400:
            logger.warning("LiteAPI %s %s returned HTTP %s", method, url, resp.status_code)
        return UpstreamReply(status_code=resp.status_code, raw=body)

    async def list_hotels(self, country_code: str, city_name: str, offset: int = 0, limit: int = 10) -> UpstreamReply:
        return await self._request(
            "GET",
            f"{self.base_url}/data/hotels",
            params={"countryCode": country_code, "cityName": city_name, "offset": offset, "limit": limit},
        )

    async def full_rates(self, payload: Dict[str, Any]) -> UpstreamReply:
        return await self._request("POST", f"{self.base_url}/hotels/rates", json=payload)

    async def hotel_details(self, hotel_id: str) -> UpstreamReply:
        return await self._request("GET", f"{self.base_url}/data/hotel", params={"hotelId": hotel_id})

    async def prebook(self, payload: Dict[str, Any]) -> UpstreamReply:
        return await self._request("POST", f"{self.book_base_url}/rates/prebook", json=payload)

    async def book(self, payload: Dict[str, Any]) -> UpstreamReply:
        return await self._request("POST", f"{self.book_base_url}/rates/book", json=payload)


ClientFactory = Callable[[str, Settings], LiteApiClient]
