from __future__ import annotations

from typing import Any, Dict

MASK = "***REDACTED***"

# Keys masked wherever they appear in a prebook offer or booking request
# (holder, guests[] and payment).
SENSITIVE_KEYS = frozenset({"email", "transactionId", "voucherCode"})


def _mask_record(record: Any) -> Any:
    if not isinstance(record, dict):
        return record
    return {k: MASK if k in SENSITIVE_KEYS else v for k, v in record.items()}


def redact_sensitive_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a prebook/booking payload that is safe to log.

    Only the shapes this gateway sends upstream are walked: top-level keys,
    ``holder``, ``payment`` and each entry of ``guests``. The input is not
    mutated.
    """

    redacted = _mask_record(payload)
    for key in ("holder", "payment"):
        if key in redacted:
            redacted[key] = _mask_record(redacted[key])
    if isinstance(redacted.get("guests"), list):
        redacted["guests"] = [_mask_record(guest) for guest in redacted["guests"]]
    return redacted
