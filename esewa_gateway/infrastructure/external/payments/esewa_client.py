"""
eSewa ePay adapter over plain HTTP (httpx).

The gateway exposes two calls used here:

- ``POST /epay/initiate/`` with a merchant-defined JSON body
- ``GET /api/epay/transaction/status/`` with ``product_code``,
  ``total_amount`` and ``transaction_uuid`` query parameters

Both operations return ``Ok(body)`` or ``Err(PaymentProviderError)``; request
failures never propagate to the caller.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import httpx

from esewa_gateway.application.dtos.payments import (
    GatewayConfig,
    GatewayEnvironment,
    PaymentInitiationRequest,
    PaymentStatusQuery,
    PaymentStatusResponse,
)
from esewa_gateway.infrastructure.external.payments.base import BasePaymentClient
from esewa_gateway.shared.result import Result, capture
from esewa_gateway.core.logging_config import get_logger


logger = get_logger(__name__)

ESEWA_BASE_URLS: dict[GatewayEnvironment, str] = {
    GatewayEnvironment.TEST: "https://uat.esewa.com.np",
    GatewayEnvironment.PRODUCTION: "https://esewa.com.np",
}

INITIATE_PATH = "/epay/initiate/"
STATUS_PATH = "/api/epay/transaction/status/"


class EsewaClient(BasePaymentClient):
    provider = "esewa"

    def __init__(
        self,
        config: GatewayConfig,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        # No Authorization header: eSewa's scheme for these calls is not settled yet
        super().__init__(
            base_url=ESEWA_BASE_URLS[config.environment],
            timeout=timeout,
            transport=transport,
        )

    async def initiate_payment(self, payload: PaymentInitiationRequest) -> Result[Any, Exception]:  # type: ignore[override]
        result = await capture(self._request("POST", INITIATE_PATH, json_body=payload))
        if result.is_err:
            logger.warning("esewa_initiate_failed", error=str(result.error))
        return result

    async def check_payment_status(  # type: ignore[override]
        self, query: Union[PaymentStatusQuery, Mapping[str, Any]]
    ) -> Result[PaymentStatusResponse, Exception]:
        result = await capture(self._check_payment_status(query))
        if result.is_err:
            logger.warning("esewa_status_check_failed", error=str(result.error))
        return result

    async def _check_payment_status(self, query: Union[PaymentStatusQuery, Mapping[str, Any]]) -> Any:
        if not isinstance(query, PaymentStatusQuery):
            query = PaymentStatusQuery.model_validate(query)
        return await self._request("GET", STATUS_PATH, params=query.to_params())
