"""Use case: traduzir pedido Mercus e encaminhar ao Hiper."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id, record_forward_outcome, record_latency

if TYPE_CHECKING:
    from app.protocols.models import ForwardedOrderResponse
    from app.protocols.order_forwarder import OrderForwarderProtocol
    from app.protocols.payload_builder import OrderPayloadBuilderProtocol

logger = logging.getLogger(__name__)


class ForwardMercusOrderUseCase:
    """Orquestra validação, tradução e envio do pedido.

    Erros de mapeamento e de envio são propagados sem tratamento; a rota
    decide o status HTTP de cada um.
    """

    def __init__(
        self,
        builder: OrderPayloadBuilderProtocol,
        forwarder: OrderForwarderProtocol,
    ) -> None:
        self._builder = builder
        self._forwarder = forwarder

    async def execute(self, payload: Any) -> ForwardedOrderResponse:
        """Executa receive → map → forward para um pedido.

        Raises:
            MissingOrderIdError: id_pedido ausente (forwarder não é chamado)
            MercusOrderMappingError: Estrutura inválida (forwarder não é chamado)
            Exception: Qualquer falha do forwarder
        """
        hiper_order = self._builder.build(payload)
        logger.info(
            "hiper_order_mapped",
            extra={
                "pedido_id": hiper_order.get("pedido_id"),
                "item_count": len(hiper_order.get("itens", [])),
            },
        )

        started_at = time.perf_counter()
        try:
            response = await self._forwarder.forward(hiper_order)
        except Exception:
            record_forward_outcome("hiper", "failed", get_correlation_id())
            raise
        finally:
            latency_ms = (time.perf_counter() - started_at) * 1000
            record_latency("hiper_forwarder", "forward", latency_ms, get_correlation_id())

        record_forward_outcome("hiper", "success", get_correlation_id())
        return response
