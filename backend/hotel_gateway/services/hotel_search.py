from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from hotel_gateway.config import Settings
from hotel_gateway.errors import NO_HOTELS_FOUND, SEARCH_HOTELS_FAILED, UpstreamCallError, UpstreamNotFoundError
from hotel_gateway.services.credentials import normalize_environment, resolve_api_key
from hotel_gateway.services.upstream.liteapi_client import ClientFactory, LiteApiClient

logger = logging.getLogger(__name__)

HOTEL_LIST_OFFSET = 0
HOTEL_LIST_LIMIT = 10
DEFAULT_CURRENCY = "USD"
DEFAULT_GUEST_NATIONALITY = "US"


def build_rates_request(hotel_ids: List[Any], adults: int, checkin: str, checkout: str) -> Dict[str, Any]:
    return {
        "hotelIds": hotel_ids,
        "occupancies": [{"adults": adults}],
        "currency": DEFAULT_CURRENCY,
        "guestNationality": DEFAULT_GUEST_NATIONALITY,
        "checkin": checkin,
        "checkout": checkout,
    }


def merge_hotels_into_rates(hotels: List[Dict[str, Any]], rates: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Attach the hotel summary matching each rate's hotelId under ``hotel``.

    Rates without a matching hotel are kept as they are.
    """

    merged: List[Dict[str, Any]] = []
    for rate in rates:
        item = dict(rate) if isinstance(rate, dict) else rate
        if isinstance(item, dict):
            hotel = next(
                (h for h in hotels if isinstance(h, dict) and h.get("id") == item.get("hotelId")),
                None,
            )
            if hotel is not None:
                item["hotel"] = hotel
        merged.append(item)
    return merged


async def search_hotels(
    settings: Settings,
    *,
    city: str,
    country_code: str,
    checkin: str,
    checkout: str,
    adults: int,
    environment: Optional[str] = None,
    client_factory: ClientFactory = LiteApiClient,
) -> Dict[str, Any]:
    """Search hotels in a city and return their rates merged with hotel info.

    - Empty hotel list -> ``{"rates": []}`` without calling rates
    - Hotel payload that is not a list -> 404
    - Rates payload that is not a list -> ``{"rates": []}``
    """

    api_key = resolve_api_key(settings, environment)
    client = client_factory(api_key, settings)
    logger.info("Searching hotels in %s/%s (%s environment)", city, country_code, normalize_environment(environment).value)

    try:
        hotels_reply = await client.list_hotels(country_code, city, HOTEL_LIST_OFFSET, HOTEL_LIST_LIMIT)
        hotels = hotels_reply.payload
        if not isinstance(hotels, list):
            logger.warning("No valid hotels data received for %s/%s", city, country_code)
            raise UpstreamNotFoundError(NO_HOTELS_FOUND)

        if not hotels:
            logger.info("Empty hotels list for %s/%s", city, country_code)
            return {"rates": []}

        hotel_ids = [hotel.get("id") for hotel in hotels if isinstance(hotel, dict)]
        logger.debug("Hotel IDs: %s", hotel_ids)

        rates_reply = await client.full_rates(build_rates_request(hotel_ids, adults, checkin, checkout))
    except UpstreamCallError as exc:
        raise UpstreamCallError(SEARCH_HOTELS_FAILED, exc.details, upstream_status=exc.upstream_status) from exc

    rates = rates_reply.payload
    if not isinstance(rates, list):
        logger.warning("No valid rates data received for %d hotels", len(hotel_ids))
        return {"rates": []}

    merged = merge_hotels_into_rates(hotels, rates)
    logger.info("Returning %d hotel rates", len(merged))
    return {"rates": merged}
