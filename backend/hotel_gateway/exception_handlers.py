from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hotel_gateway.errors import ConfigurationError, GatewayError, error_response

logger = logging.getLogger(__name__)


def _include_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.include_error_details)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:  # type: ignore[override]
        if isinstance(exc, ConfigurationError):
            logger.error("API key not found for environment: %s", exc.environment)
        elif exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(include_details=_include_details(request)),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # type: ignore[override]
        details: Any = jsonable_encoder(exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response("Request validation failed", details),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # type: ignore[override]
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        details = str(exc) if _include_details(request) else None
        return JSONResponse(
            status_code=500,
            content=error_response("Unexpected server error", details),
        )
