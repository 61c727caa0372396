"""
Factory for payment gateway clients.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import httpx

from esewa_gateway.core.settings import payment_settings
from esewa_gateway.application.dtos.payments import GatewayConfig
from esewa_gateway.application.ports.payment_gateway import PaymentGateway
from .esewa_client import EsewaClient, ESEWA_BASE_URLS
from .exceptions import PaymentProviderError


def create_esewa_client(
    config: Union[GatewayConfig, Mapping[str, Any]],
    *,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> EsewaClient:
    """Build an eSewa client bound to the environment's base URL.

    Raises pydantic ``ValidationError`` for an unknown environment.
    """
    if not isinstance(config, GatewayConfig):
        config = GatewayConfig.model_validate(config)
    return EsewaClient(config, timeout=timeout, transport=transport)


def get_payment_gateway(
    provider: Optional[str] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PaymentGateway:
    name = (provider or payment_settings.default_provider).lower()
    if name == "esewa":
        cfg = payment_settings.esewa
        if not (cfg.merchant_id and cfg.secret_key):
            raise RuntimeError("ESEWA configuration incomplete")
        return create_esewa_client(
            {
                "environment": cfg.environment,
                "merchant_id": cfg.merchant_id,
                "secret_key": cfg.secret_key,
            },
            timeout=cfg.timeout,
            transport=transport,
        )
    raise ValueError(f"Unsupported payment provider: {name}")


__all__ = [
    "EsewaClient",
    "ESEWA_BASE_URLS",
    "PaymentProviderError",
    "create_esewa_client",
    "get_payment_gateway",
]
