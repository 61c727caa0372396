"""
Application service orchestrating payment use-cases.

This class depends only on the application PaymentGateway port and DTOs.
Gateway implementations are provided by infrastructure and injected by the
caller, keeping dependencies one-way. Results pass through unchanged.
"""
from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel

from esewa_gateway.application.dtos.payments import (
    PaymentInitiationRequest,
    PaymentStatusQuery,
    PaymentStatusResponse,
)
from esewa_gateway.application.ports.payment_gateway import PaymentGateway
from esewa_gateway.core.logging_config import get_logger
from esewa_gateway.shared.codes.payment_codes import map_provider_status
from esewa_gateway.shared.result import Result


logger = get_logger(__name__)


def _transaction_uuid(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return getattr(payload, "transaction_uuid", None)
    if isinstance(payload, Mapping):
        return payload.get("transaction_uuid")
    return None


class PaymentService:
    def __init__(self, gateway: PaymentGateway) -> None:
        self.gateway = gateway

    async def initiate_payment(self, payload: PaymentInitiationRequest) -> Result[Any, Exception]:
        logger.info(
            "payment_initiate_request",
            provider=self.gateway.provider,
            transaction_uuid=_transaction_uuid(payload),
        )
        result = await self.gateway.initiate_payment(payload)
        logger.info(
            "payment_initiate_response",
            provider=self.gateway.provider,
            ok=result.is_ok,
        )
        return result

    async def check_payment_status(
        self, query: Union[PaymentStatusQuery, Mapping[str, Any]]
    ) -> Result[PaymentStatusResponse, Exception]:
        logger.info(
            "payment_status_request",
            provider=self.gateway.provider,
            transaction_uuid=_transaction_uuid(query),
        )
        result = await self.gateway.check_payment_status(query)
        provider_status = None
        if result.is_ok and isinstance(result.value, Mapping):
            provider_status = result.value.get("status")
        logger.info(
            "payment_status_response",
            provider=self.gateway.provider,
            ok=result.is_ok,
            provider_status=provider_status,
            status=map_provider_status(self.gateway.provider, provider_status),
        )
        return result
