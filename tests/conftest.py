"""Pytest bootstrap configuration.

Keep gateway settings deterministic before application settings are imported,
and provide a mock-transport client factory so no test touches the network.
"""
import os

os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("ESEWA__ENVIRONMENT", "test")

import httpx
import pytest

from esewa_gateway.application.dtos.payments import GatewayConfig
from esewa_gateway.core.logging_config import configure_logging
from esewa_gateway.infrastructure.external.payments import create_esewa_client

configure_logging()


@pytest.fixture
def gateway_config() -> GatewayConfig:
    return GatewayConfig(environment="test", merchant_id="M1", secret_key="S1")


@pytest.fixture
def make_client(gateway_config):
    """Return a factory building an EsewaClient whose requests go to ``handler``."""

    def _make(handler, config=None):
        return create_esewa_client(config or gateway_config, transport=httpx.MockTransport(handler))

    return _make
