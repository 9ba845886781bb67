from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from hotel_gateway.config import Settings
from hotel_gateway.errors import PREBOOK_FAILED, BookingRejected, UpstreamCallError
from hotel_gateway.services.credentials import resolve_api_key
from hotel_gateway.services.redaction import redact_sensitive_fields
from hotel_gateway.services.upstream.liteapi_client import ClientFactory, LiteApiClient

logger = logging.getLogger(__name__)

PAYMENT_METHOD_TRANSACTION_ID = "TRANSACTION_ID"
BOOKING_CONFIRMED_MESSAGE = "Booking confirmed successfully!"


def build_prebook_offer(rate_id: str, voucher_code: Optional[str] = None) -> Dict[str, Any]:
    offer: Dict[str, Any] = {"offerId": rate_id, "usePaymentSdk": True}
    if voucher_code:
        offer["voucherCode"] = voucher_code
    return offer


def build_booking_request(
    *,
    prebook_id: str,
    first_name: str,
    last_name: str,
    email: str,
    transaction_id: str,
) -> Dict[str, Any]:
    """Booking with the holder doubling as the single guest of occupancy 1."""

    return {
        "holder": {"firstName": first_name, "lastName": last_name, "email": email},
        "payment": {"method": PAYMENT_METHOD_TRANSACTION_ID, "transactionId": transaction_id},
        "prebookId": prebook_id,
        "guests": [
            {
                "occupancyNumber": 1,
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
                "remarks": "",
            }
        ],
    }


def _rejection_message(raw: Any) -> str:
    error = raw.get("error") if isinstance(raw, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return "Booking failed: " + (message or "Unknown error")


async def prebook(
    settings: Settings,
    *,
    rate_id: str,
    environment: Optional[str] = None,
    voucher_code: Optional[str] = None,
    client_factory: ClientFactory = LiteApiClient,
) -> Dict[str, Any]:
    api_key = resolve_api_key(settings, environment)
    client = client_factory(api_key, settings)
    offer = build_prebook_offer(rate_id, voucher_code)

    logger.info("Calling prebook with %s", redact_sensitive_fields(offer))
    try:
        reply = await client.prebook(offer)
    except UpstreamCallError as exc:
        raise UpstreamCallError(PREBOOK_FAILED, exc.details, upstream_status=exc.upstream_status) from exc

    logger.info("Prebook finished with upstream status %s", reply.status_code)
    return {"success": reply.raw}


async def book(
    settings: Settings,
    *,
    prebook_id: str,
    guest_first_name: str,
    guest_last_name: str,
    guest_email: str,
    transaction_id: str,
    environment: Optional[str] = None,
    client_factory: ClientFactory = LiteApiClient,
) -> Dict[str, Any]:
    """Confirm a prebooked offer.

    An absent upstream body or one carrying an ``error`` object is a
    rejection; transport failures are reported the same way.
    """

    api_key = resolve_api_key(settings, environment)
    client = client_factory(api_key, settings)
    request = build_booking_request(
        prebook_id=prebook_id,
        first_name=guest_first_name,
        last_name=guest_last_name,
        email=guest_email,
        transaction_id=transaction_id,
    )

    logger.info("Calling book with %s", redact_sensitive_fields(request))
    try:
        reply = await client.book(request)
    except UpstreamCallError as exc:
        raise BookingRejected(details=str(exc)) from exc

    if reply.raw is None or reply.error is not None:
        raise BookingRejected(details=_rejection_message(reply.raw))

    logger.info("Booking confirmed for prebook %s", prebook_id)
    return {
        "success": True,
        "booking": reply.raw,
        "message": BOOKING_CONFIRMED_MESSAGE,
    }
