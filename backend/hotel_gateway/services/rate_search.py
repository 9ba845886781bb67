from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from hotel_gateway.config import Settings
from hotel_gateway.errors import NO_AVAILABILITY_FOUND, UpstreamCallError, UpstreamNotFoundError
from hotel_gateway.services.credentials import resolve_api_key
from hotel_gateway.services.hotel_search import build_rates_request
from hotel_gateway.services.upstream.liteapi_client import ClientFactory, LiteApiClient

logger = logging.getLogger(__name__)

BOARD_TYPES: Sequence[str] = ("RO", "BI")
REFUNDABLE_TAG = "RFN"


def _first_amount(prices: Any) -> Any:
    if isinstance(prices, list) and prices and isinstance(prices[0], dict):
        return prices[0].get("amount")
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _refundable_tag(rate: Dict[str, Any]) -> Any:
    return _as_dict(rate.get("cancellationPolicies")).get("refundableTag")


def order_refundable_first(rates: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Refundable rates first; ties keep upstream order (sorted() is stable)."""

    return sorted(rates, key=lambda rate: 0 if _refundable_tag(rate) == REFUNDABLE_TAG else 1)


def select_board_offer(room_type: Dict[str, Any], board_type: str) -> Optional[Dict[str, Any]]:
    rates = [
        rate
        for rate in _as_list(room_type.get("rates"))
        if isinstance(rate, dict) and rate.get("boardType") == board_type
    ]
    ordered = order_refundable_first(rates)
    if not ordered:
        return None

    rate = ordered[0]
    retail = _as_dict(rate.get("retailRate"))
    return {
        "rateName": rate.get("name"),
        "offerId": room_type.get("offerId"),
        "board": rate.get("boardName"),
        "refundableTag": _refundable_tag(rate),
        "retailRate": _first_amount(retail.get("total")),
        "originalRate": _first_amount(retail.get("suggestedSellingPrice")),
    }


def summarize_hotel_rates(hotel: Dict[str, Any]) -> List[Dict[str, Any]]:
    """One entry per (room type, board) pair that has at least one rate."""

    offers: List[Dict[str, Any]] = []
    for room_type in _as_list(hotel.get("roomTypes")):
        if not isinstance(room_type, dict):
            continue
        for board_type in BOARD_TYPES:
            offer = select_board_offer(room_type, board_type)
            if offer is not None:
                offers.append(offer)
    return offers


async def search_rates(
    settings: Settings,
    *,
    hotel_id: str,
    checkin: str,
    checkout: str,
    adults: int,
    environment: Optional[str] = None,
    client_factory: ClientFactory = LiteApiClient,
) -> Dict[str, Any]:
    """Rates for a single hotel, reduced to one offer per room type and board.

    Upstream failures and empty availability both surface as
    "No availability found" (500 and 404 respectively).
    """

    api_key = resolve_api_key(settings, environment)
    client = client_factory(api_key, settings)

    try:
        logger.info("Getting rates for hotel %s", hotel_id)
        rates_reply = await client.full_rates(build_rates_request([hotel_id], adults, checkin, checkout))
        rates = rates_reply.payload
        if not isinstance(rates, list) or not rates:
            logger.info("No rates found for hotel %s", hotel_id)
            raise UpstreamNotFoundError(NO_AVAILABILITY_FOUND)

        logger.info("Getting hotel details for %s", hotel_id)
        details_reply = await client.hotel_details(hotel_id)

        rate_info = [summarize_hotel_rates(hotel) if isinstance(hotel, dict) else [] for hotel in rates]
    except UpstreamCallError as exc:
        raise UpstreamCallError(
            NO_AVAILABILITY_FOUND,
            exc.details,
            upstream_status=exc.upstream_status,
            expose_details=False,
        ) from exc

    return {"hotelInfo": details_reply.payload, "rateInfo": rate_info}
