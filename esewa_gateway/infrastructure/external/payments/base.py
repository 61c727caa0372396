"""
Base payment client implementing shared concerns: http, error wrapping, logging.

Concrete providers should subclass and implement provider-specific logic.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel

from esewa_gateway.core.logging_config import get_logger
from esewa_gateway.application.dtos.payments import (
    PaymentInitiationRequest,
    PaymentStatusQuery,
    PaymentStatusResponse,
)
from esewa_gateway.application.ports.payment_gateway import PaymentGateway
from esewa_gateway.infrastructure.external.payments.exceptions import PaymentProviderError
from esewa_gateway.shared.result import Result


logger = get_logger(__name__)


class BasePaymentClient(PaymentGateway):
    provider: str = "base"

    default_headers: dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        *,
        base_url: str,
        timeout: Optional[float] = None,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {}
        if timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(timeout)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={**self.default_headers, **(headers or {})},
            transport=transport,
            follow_redirects=True,
            **client_kwargs,
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    async def aclose(self) -> None:
        """Close underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    # Default implementations raise to force override where needed
    async def initiate_payment(self, payload: PaymentInitiationRequest) -> Result[Any, Exception]:  # type: ignore[override]
        raise NotImplementedError

    async def check_payment_status(  # type: ignore[override]
        self, query: Union[PaymentStatusQuery, Mapping[str, Any]]
    ) -> Result[PaymentStatusResponse, Exception]:
        raise NotImplementedError

    # Helpers
    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Any = None,
    ) -> Any:
        """Send one request and return the decoded body; failures raise PaymentProviderError."""
        if isinstance(json_body, BaseModel):
            json_body = json_body.model_dump(mode="json")
        self._log("payment_http_request", method=method, path=path, params=params)
        start_time = datetime.now()
        try:
            response = await self._client.request(method, path, params=params, json=json_body)
            response.raise_for_status()
            data = self._decode(response)
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise PaymentProviderError(
                f"{self.provider} responded with status {status_code}",
                provider=self.provider,
                provider_code=str(status_code),
                details={"status_code": status_code, "body": exc.response.text},
            ) from exc
        except httpx.HTTPError as exc:
            raise PaymentProviderError(str(exc) or type(exc).__name__, provider=self.provider) from exc
        except (TypeError, ValueError) as exc:
            # JSON encoding of the payload or decoding of the body
            raise PaymentProviderError(f"Invalid JSON: {exc}", provider=self.provider) from exc

        elapsed = (datetime.now() - start_time).total_seconds() * 1000
        self._log(
            "payment_http_response",
            method=method,
            path=path,
            status_code=response.status_code,
            elapsed_ms=round(elapsed, 2),
        )
        return data

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        if "application/json" in response.headers.get("content-type", ""):
            return response.json()
        return response.text

    def _log(self, event: str, **kwargs) -> None:
        logger.info(
            event,
            provider=self.provider,
            **kwargs,
        )
