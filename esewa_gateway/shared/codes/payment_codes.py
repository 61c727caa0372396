"""
Payment specific codes and provider status mapping.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Optional


class PaymentCode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Provider/Network errors (6xxxx)
    PROVIDER_ERROR = 60000


# Provider→internal status mapping (extend per needs)
PROVIDER_STATUS_TO_INTERNAL = {
    "esewa": {
        # Per transaction status API `status`
        "COMPLETE": "succeeded",
        "PENDING": "pending",
        "AMBIGUOUS": "processing",
        "FULL_REFUND": "refunded",
        "PARTIAL_REFUND": "partially_refunded",
        "NOT_FOUND": "not_found",
        "CANCELED": "canceled",
    },
}


def map_provider_status(provider: str, provider_status: Optional[str]) -> Optional[str]:
    """Translate a gateway status to the internal vocabulary; unknown values pass through."""
    if provider_status is None:
        return None
    mapping = PROVIDER_STATUS_TO_INTERNAL.get(provider, {})
    return mapping.get(provider_status, provider_status)
