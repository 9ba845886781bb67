from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from hotel_gateway.config import APP_NAME, APP_VERSION, PUBLIC_ENDPOINTS, SERVICE_NAME

router = APIRouter(tags=["health"])


@router.get("/")
async def info() -> dict[str, Any]:
    return {
        "message": APP_NAME,
        "version": APP_VERSION,
        "endpoints": list(PUBLIC_ENDPOINTS),
    }


# Deployment health check aliases
@router.get("/health")
@router.get("/health/")
async def deployment_health() -> dict[str, Any]:
    """Simple health check for deployment platforms"""
    return {"ok": True, "service": SERVICE_NAME, "status": "healthy"}
