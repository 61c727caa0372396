"""
eSewa payment gateway client.
"""
from esewa_gateway.application.dtos.payments import (
    GatewayConfig,
    GatewayEnvironment,
    PaymentStatusQuery,
)
from esewa_gateway.application.services.payment_service import PaymentService
from esewa_gateway.core.logging_config import configure_logging
from esewa_gateway.infrastructure.external.payments import (
    ESEWA_BASE_URLS,
    EsewaClient,
    PaymentProviderError,
    create_esewa_client,
    get_payment_gateway,
)
from esewa_gateway.shared.result import Err, Ok, Result, capture

__all__ = [
    "GatewayConfig",
    "GatewayEnvironment",
    "PaymentStatusQuery",
    "PaymentService",
    "configure_logging",
    "ESEWA_BASE_URLS",
    "EsewaClient",
    "PaymentProviderError",
    "create_esewa_client",
    "get_payment_gateway",
    "Err",
    "Ok",
    "Result",
    "capture",
]
