"""Structured JSON access logging.

Every request logs:
{
  request_id,
  path,
  method,
  status_code,
  latency_ms
}

The request_id is taken from X-Request-Id when the caller sends one and is
echoed back on the response.
"""
from __future__ import annotations

import json
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("structured_access")


def _log_entry(request: Request, request_id: str, status_code: int, latency_ms: float) -> str:
    return json.dumps(
        {
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "status_code": status_code,
            "latency_ms": latency_ms,
        }
    )


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Log structured JSON for every request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())[:12]
        start = time.monotonic()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            latency_ms = round((time.monotonic() - start) * 1000, 2)
            logger.error(_log_entry(request, request_id, 500, latency_ms))
            raise

        latency_ms = round((time.monotonic() - start) * 1000, 2)
        status_code = response.status_code
        entry = _log_entry(request, request_id, status_code, latency_ms)

        if status_code >= 500:
            logger.error(entry)
        elif status_code >= 400:
            logger.warning(entry)
        else:
            logger.info(entry)

        response.headers["X-Request-Id"] = request_id
        return response
