from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from hotel_gateway.config import Settings, get_settings
from hotel_gateway.services.hotel_search import search_hotels
from hotel_gateway.services.rate_search import search_rates

router = APIRouter(tags=["search"])


@router.get("/search-hotels")
async def search_hotels_endpoint(
    checkin: str = Query(..., min_length=1),
    checkout: str = Query(..., min_length=1),
    adults: int = Query(..., ge=1),
    city: str = Query(..., min_length=1),
    country_code: str = Query(..., alias="countryCode", min_length=1),
    environment: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Hotels in a city with their rates; each rate carries its ``hotel``."""

    return await search_hotels(
        settings,
        city=city,
        country_code=country_code,
        checkin=checkin,
        checkout=checkout,
        adults=adults,
        environment=environment,
    )


@router.get("/search-rates")
async def search_rates_endpoint(
    checkin: str = Query(..., min_length=1),
    checkout: str = Query(..., min_length=1),
    adults: int = Query(..., ge=1),
    hotel_id: str = Query(..., alias="hotelId", min_length=1),
    environment: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    return await search_rates(
        settings,
        hotel_id=hotel_id,
        checkin=checkin,
        checkout=checkout,
        adults=adults,
        environment=environment,
    )
