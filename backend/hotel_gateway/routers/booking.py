from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from hotel_gateway.config import Settings, get_settings
from hotel_gateway.services.booking import book, prebook

router = APIRouter(tags=["booking"])


class PrebookRequest(BaseModel):
    rateId: str = Field(..., min_length=1)
    environment: Optional[str] = None
    voucherCode: Optional[str] = None


@router.post("/prebook")
async def prebook_endpoint(
    payload: PrebookRequest,
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Hold an offer. ``success`` carries the raw upstream prebook body."""

    return await prebook(
        settings,
        rate_id=payload.rateId,
        environment=payload.environment,
        voucher_code=payload.voucherCode,
    )


@router.get("/book")
async def book_endpoint(
    prebook_id: str = Query(..., alias="prebookId", min_length=1),
    guest_first_name: str = Query(..., alias="guestFirstName"),
    guest_last_name: str = Query(..., alias="guestLastName"),
    guest_email: str = Query(..., alias="guestEmail"),
    transaction_id: str = Query(..., alias="transactionId"),
    environment: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    # GET is kept for the mobile client, which opens this URL after payment.
    return await book(
        settings,
        prebook_id=prebook_id,
        guest_first_name=guest_first_name,
        guest_last_name=guest_last_name,
        guest_email=guest_email,
        transaction_id=transaction_id,
        environment=environment,
    )
