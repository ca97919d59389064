"""Modelos compartilhados entre use cases e adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ForwardedOrderResponse:
    """Resposta da plataforma de destino ao pedido encaminhado.

    Attributes:
        status_code: Status HTTP (2xx)
        body: Corpo decodificado (JSON, ou texto quando não for JSON)
    """

    status_code: int
    body: Any = None
