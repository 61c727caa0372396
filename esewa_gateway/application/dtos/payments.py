"""
Payment DTOs (Pydantic v2) used at application boundaries.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field


class GatewayEnvironment(str, Enum):
    TEST = "test"
    PRODUCTION = "production"


class GatewayConfig(BaseModel):
    """Environment and merchant credentials for one gateway client."""

    environment: GatewayEnvironment
    merchant_id: str
    secret_key: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)


class PaymentStatusQuery(BaseModel):
    product_code: str
    transaction_uuid: str
    total_amount: Decimal

    model_config = ConfigDict(frozen=True)

    def to_params(self) -> dict[str, str]:
        # 100.0 -> "100", 99.50 -> "99.5"; "f" keeps 1E+2 out of the query
        return {
            "product_code": self.product_code,
            "total_amount": format(self.total_amount.normalize(), "f"),
            "transaction_uuid": self.transaction_uuid,
        }


# Merchant-defined initiation body; forwarded verbatim
PaymentInitiationRequest = Union[Mapping[str, Any], BaseModel]

# Gateway-defined body (parsed JSON, or text when the gateway does not answer JSON)
PaymentStatusResponse = Any
