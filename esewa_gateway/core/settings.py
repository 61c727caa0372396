"""
Payment-related settings using pydantic-settings v2 with nested env keys.

Kept apart from core.config.Settings so gateway credentials stay in one place.
"""
from __future__ import annotations

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field

from esewa_gateway.application.dtos.payments import GatewayEnvironment


class EsewaSettings(BaseModel):
    environment: GatewayEnvironment = GatewayEnvironment.TEST
    merchant_id: Optional[str] = None
    secret_key: Optional[str] = Field(default=None, repr=False)
    # Seconds; None keeps the transport default
    timeout: Optional[float] = None


class PaymentSettings(BaseSettings):
    default_provider: str = "esewa"
    esewa: EsewaSettings = Field(default_factory=EsewaSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


payment_settings = PaymentSettings()
