import json
from decimal import Decimal

import httpx
import pytest
from pydantic import ValidationError

from esewa_gateway.application.dtos.payments import GatewayConfig, PaymentStatusQuery
from esewa_gateway.infrastructure.external.payments import (
    PaymentProviderError,
    create_esewa_client,
)


def test_test_environment_uses_sandbox_host():
    client = create_esewa_client({"environment": "test", "merchant_id": "M1", "secret_key": "S1"})
    assert client.base_url == "https://uat.esewa.com.np"
    assert client.http_client.headers["Content-Type"] == "application/json"
    assert "Authorization" not in client.http_client.headers


def test_production_environment_uses_live_host():
    client = create_esewa_client(GatewayConfig(environment="production", merchant_id="M1", secret_key="S1"))
    assert client.base_url == "https://esewa.com.np"


def test_unknown_environment_is_rejected():
    with pytest.raises(ValidationError):
        create_esewa_client({"environment": "staging", "merchant_id": "M1", "secret_key": "S1"})


def test_config_is_immutable_and_hides_secret(gateway_config):
    with pytest.raises(ValidationError):
        gateway_config.merchant_id = "M2"
    assert "S1" not in repr(gateway_config)


@pytest.mark.asyncio
async def test_initiate_payment_posts_payload_verbatim(make_client):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    payload = {"amount": "100", "transaction_uuid": "txn-1", "product_code": "EPAYTEST", "extra": [1, 2]}
    async with make_client(handler) as client:
        result = await client.initiate_payment(payload)

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://uat.esewa.com.np/epay/initiate/"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == payload
    value, error = result
    assert error is None
    assert value == {"ok": True}


@pytest.mark.asyncio
async def test_check_payment_status_sends_query_and_returns_body(make_client):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "COMPLETE"})

    async with make_client(handler) as client:
        result = await client.check_payment_status(
            PaymentStatusQuery(product_code="EPAYTEST", transaction_uuid="txn-1", total_amount=100)
        )

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/api/epay/transaction/status/"
    assert request.url.host == "uat.esewa.com.np"
    assert dict(request.url.params) == {
        "product_code": "EPAYTEST",
        "total_amount": "100",
        "transaction_uuid": "txn-1",
    }
    assert result.is_ok
    assert result.value == {"status": "COMPLETE"}


@pytest.mark.asyncio
async def test_check_payment_status_accepts_mapping(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["total_amount"] == "99.5"
        return httpx.Response(200, json={"status": "PENDING"})

    async with make_client(handler) as client:
        value, error = await client.check_payment_status(
            {"product_code": "EPAYTEST", "transaction_uuid": "txn-2", "total_amount": Decimal("99.50")}
        )

    assert error is None
    assert value == {"status": "PENDING"}


@pytest.mark.asyncio
async def test_check_payment_status_network_failure_returns_err(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        value, error = await client.check_payment_status(
            {"product_code": "EPAYTEST", "transaction_uuid": "txn-1", "total_amount": 100}
        )

    assert value is None
    assert isinstance(error, PaymentProviderError)
    assert isinstance(error.__cause__, httpx.ConnectError)
    assert error.details["provider"] == "esewa"


@pytest.mark.asyncio
async def test_non_2xx_status_returns_err_with_status_code(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error_message": "Invalid payload signature."})

    async with make_client(handler) as client:
        result = await client.initiate_payment({"amount": "100"})

    assert result.is_err
    error = result.error
    assert isinstance(error, PaymentProviderError)
    assert error.status_code == 400
    assert error.details["provider_code"] == "400"
    assert "Invalid payload signature." in error.details["body"]


@pytest.mark.asyncio
async def test_invalid_status_query_returns_err_without_request(make_client):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    async with make_client(handler) as client:
        result = await client.check_payment_status({"product_code": "EPAYTEST"})

    assert calls == []
    assert isinstance(result.error, ValidationError)


@pytest.mark.asyncio
async def test_non_json_body_is_returned_as_text(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>redirect form</html>", headers={"content-type": "text/html"})

    async with make_client(handler) as client:
        value, error = await client.initiate_payment({"amount": "100"})

    assert error is None
    assert value == "<html>redirect form</html>"


@pytest.mark.asyncio
async def test_malformed_json_body_returns_err(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})

    async with make_client(handler) as client:
        result = await client.check_payment_status(
            {"product_code": "EPAYTEST", "transaction_uuid": "txn-1", "total_amount": 100}
        )

    assert isinstance(result.error, PaymentProviderError)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (100, "100"),
        (100.0, "100"),
        (Decimal("1E+2"), "100"),
        (Decimal("99.50"), "99.5"),
        (Decimal("0.00"), "0"),
    ],
)
def test_status_query_amount_is_rendered_like_a_plain_number(amount, expected):
    query = PaymentStatusQuery(product_code="EPAYTEST", transaction_uuid="txn-1", total_amount=amount)
    assert query.to_params()["total_amount"] == expected


def test_status_check_is_typed_with_the_gateway_response():
    from esewa_gateway.application.ports.payment_gateway import PaymentGateway
    from esewa_gateway.infrastructure.external.payments import EsewaClient

    for cls in (PaymentGateway, EsewaClient):
        assert "PaymentStatusResponse" in cls.check_payment_status.__annotations__["return"]
