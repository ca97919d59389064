"""Testes do HiperOrderForwarder."""

from __future__ import annotations

from typing import Any

import pytest

from app.infra.hiper import HiperOrderForwarder
from app.protocols.models import ForwardedOrderResponse
from config.settings import HiperSettings


class _RecordingHttpClient:
    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    async def send_order(
        self,
        endpoint: str,
        api_key: str,
        payload: dict[str, Any],
    ) -> ForwardedOrderResponse:
        self.calls.append({"endpoint": endpoint, "api_key": api_key, "payload": payload})
        return ForwardedOrderResponse(status_code=200, body="ok")


@pytest.mark.asyncio
async def test_forward_uses_injected_settings() -> None:
    http_client = _RecordingHttpClient()
    settings = HiperSettings(api_endpoint="https://hiper.test/pedidos", api_key="tok")
    forwarder = HiperOrderForwarder(http_client=http_client, settings=settings)

    result = await forwarder.forward({"pedido_id": "1"})

    assert result == ForwardedOrderResponse(status_code=200, body="ok")
    assert http_client.calls == [
        {
            "endpoint": "https://hiper.test/pedidos",
            "api_key": "tok",
            "payload": {"pedido_id": "1"},
        }
    ]
    assert forwarder.endpoint == "https://hiper.test/pedidos"


@pytest.mark.asyncio
async def test_forward_propagates_errors() -> None:
    class _FailingHttpClient:
        async def send_order(self, endpoint: str, api_key: str, payload: dict[str, Any]):
            raise ConnectionError("sem rede")

    forwarder = HiperOrderForwarder(http_client=_FailingHttpClient(), settings=HiperSettings())

    with pytest.raises(ConnectionError, match="sem rede"):
        await forwarder.forward({})
