"""Protocolo de encaminhamento do pedido traduzido."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import ForwardedOrderResponse


class OrderForwarderProtocol(Protocol):
    """Envia um pedido já traduzido à plataforma de destino.

    Implementações propagam falhas (status fora de 2xx, rede, timeout)
    como exceções; não há retry.
    """

    async def forward(self, order: dict[str, Any]) -> ForwardedOrderResponse: ...
