"""Protocolo de construção do payload de destino."""

from __future__ import annotations

from typing import Any, Protocol


class OrderPayloadBuilderProtocol(Protocol):
    """Traduz o corpo recebido no payload da plataforma de destino.

    Deve levantar MercusOrderMappingError (ou subclasse) para entrada malformada.
    """

    def build(self, payload: Any) -> dict[str, Any]: ...
