"""Forwarder de pedidos para a API do Hiper."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.http_client import HiperHttpClientProtocol
    from app.protocols.models import ForwardedOrderResponse
    from config.settings import HiperSettings


class HiperOrderForwarder:
    """Encaminha o pedido traduzido ao endpoint configurado do Hiper.

    Endpoint e token vêm de ``HiperSettings`` recebido na construção.
    """

    def __init__(
        self,
        http_client: HiperHttpClientProtocol,
        settings: HiperSettings,
    ) -> None:
        self._http_client = http_client
        self._settings = settings

    @property
    def endpoint(self) -> str:
        return self._settings.api_endpoint

    async def forward(self, order: dict[str, Any]) -> ForwardedOrderResponse:
        return await self._http_client.send_order(
            endpoint=self._settings.api_endpoint,
            api_key=self._settings.api_key,
            payload=order,
        )
