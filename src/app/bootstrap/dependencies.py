"""Factories de dependências concretas.

Settings são passadas explicitamente; quando omitidas, vêm do ambiente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.order_forwarder import OrderForwarderProtocol
    from app.use_cases.mercus import ForwardMercusOrderUseCase
    from config.settings import HiperSettings


def create_hiper_order_forwarder(
    settings: HiperSettings | None = None,
) -> OrderForwarderProtocol:
    """Cria forwarder HTTP real para a API do Hiper."""
    from api.connectors.hiper import create_hiper_http_client
    from app.infra.hiper import HiperOrderForwarder
    from config.settings import get_hiper_settings

    hiper = settings or get_hiper_settings()
    return HiperOrderForwarder(
        http_client=create_hiper_http_client(hiper),
        settings=hiper,
    )


def create_forward_order_use_case(
    forwarder: OrderForwarderProtocol | None = None,
    hiper_settings: HiperSettings | None = None,
) -> ForwardMercusOrderUseCase:
    """Cria o use case Mercus → Hiper.

    Args:
        forwarder: Forwarder alternativo (ex.: fake em testes).
        hiper_settings: Settings do Hiper para o forwarder padrão.
    """
    from api.payload_builders.hiper import HiperOrderPayloadBuilder
    from app.use_cases.mercus import ForwardMercusOrderUseCase

    return ForwardMercusOrderUseCase(
        builder=HiperOrderPayloadBuilder(),
        forwarder=forwarder or create_hiper_order_forwarder(hiper_settings),
    )
