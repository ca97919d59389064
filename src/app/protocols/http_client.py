"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import ForwardedOrderResponse


class HiperHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP do Hiper."""

    async def send_order(
        self,
        endpoint: str,
        api_key: str,
        payload: dict[str, Any],
    ) -> ForwardedOrderResponse: ...
