"""
Shared codes used across layers.

Payment-specific codes and the provider status mapping live under
`shared.codes.payment_codes`.
"""
from .payment_codes import PaymentCode, PROVIDER_STATUS_TO_INTERNAL, map_provider_status

__all__ = ["PaymentCode", "PROVIDER_STATUS_TO_INTERNAL", "map_provider_status"]
