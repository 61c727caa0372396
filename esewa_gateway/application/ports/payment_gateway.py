"""
Payment gateway port (application/ports) exposing a replaceable protocol.

Application depends on this Protocol; infrastructure implements adapters.
"""
from __future__ import annotations

from typing import Any, Mapping, Protocol, Union, runtime_checkable

from esewa_gateway.application.dtos.payments import (
    PaymentInitiationRequest,
    PaymentStatusQuery,
    PaymentStatusResponse,
)
from esewa_gateway.shared.result import Result


@runtime_checkable
class PaymentGateway(Protocol):
    """Gateway protocol for third-party payment providers.

    Operations never raise for request failures; they return ``Err``.
    """

    provider: str

    async def initiate_payment(self, payload: PaymentInitiationRequest) -> Result[Any, Exception]: ...

    async def check_payment_status(
        self, query: Union[PaymentStatusQuery, Mapping[str, Any]]
    ) -> Result[PaymentStatusResponse, Exception]: ...

    async def aclose(self) -> None: ...
