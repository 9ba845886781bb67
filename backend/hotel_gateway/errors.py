from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import status


API_KEY_NOT_CONFIGURED = "API key not configured"
NO_HOTELS_FOUND = "No hotels found for this location"
NO_AVAILABILITY_FOUND = "No availability found"
SEARCH_HOTELS_FAILED = "Failed to search hotels"
PREBOOK_FAILED = "Prebook failed"
BOOKING_FAILED = "Booking failed"
UPSTREAM_REQUEST_FAILED = "Upstream request failed"


@dataclass(eq=False)
class GatewayError(Exception):
    status_code: int
    message: str
    details: Optional[str] = None

    def __str__(self) -> str:
        return self.details or self.message

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if include_details and self.details:
            payload["details"] = self.details
        return payload


class ConfigurationError(GatewayError):
    """No credential configured for the requested environment."""

    def __init__(self, environment: str) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=API_KEY_NOT_CONFIGURED,
        )
        self.environment = environment


class UpstreamNotFoundError(GatewayError):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message)


class UpstreamCallError(GatewayError):
    """Network failure, upstream 5xx or an unreadable upstream body."""

    def __init__(
        self,
        message: str = UPSTREAM_REQUEST_FAILED,
        details: Optional[str] = None,
        *,
        upstream_status: Optional[int] = None,
        expose_details: bool = True,
    ) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=message,
            details=details,
        )
        self.upstream_status = upstream_status
        self.expose_details = expose_details

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        return super().to_dict(include_details and self.expose_details)


class BookingRejected(GatewayError):
    """The booking call failed, either explicitly upstream or in transit."""

    def __init__(self, details: Optional[str] = None) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=BOOKING_FAILED,
            details=details,
        )

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": False}
        payload.update(super().to_dict(include_details))
        return payload


def error_response(message: str, details: Any = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"error": message}
    if details is not None:
        payload["details"] = details
    return payload
