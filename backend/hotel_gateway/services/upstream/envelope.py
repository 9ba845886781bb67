from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def unwrap_payload(body: Any) -> Any:
    """Return the useful part of a LiteAPI response body.

    Most endpoints wrap their result as ``{"data": ...}``, some return it
    directly. Error bodies (``{"error": {...}}``) have no ``data`` and come
    back unchanged so callers can inspect them.
    """

    if isinstance(body, dict) and body.get("data") is not None:
        return body["data"]
    return body


@dataclass(frozen=True)
class UpstreamReply:
    status_code: int
    raw: Any

    @property
    def payload(self) -> Any:
        return unwrap_payload(self.raw)

    @property
    def error(self) -> Any:
        if isinstance(self.raw, dict):
            return self.raw.get("error")
        return None
