"""Entrypoint da integração Mercus → Hiper.

Expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    integracao-hiper-mercus
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    create_forward_order_use_case,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols.order_forwarder import OrderForwarderProtocol
    from config.settings import HiperSettings

# Logging antes de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings no startup; em staging/production aborta se inválidas."""
    logger.info("app_starting", extra={"service": "integracao-hiper-mercus"})
    validate_runtime_settings(hiper_settings=app.state.hiper_settings)
    yield
    logger.info("app_shutting_down", extra={"service": "integracao-hiper-mercus"})


def create_app(
    *,
    hiper_settings: HiperSettings | None = None,
    forwarder: OrderForwarderProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        hiper_settings: Endpoint/token do Hiper. Padrão: variáveis de ambiente.
        forwarder: Forwarder alternativo (ex.: fake sem rede em testes).

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Integração Mercus → Hiper",
        description="Recebe pedidos do Mercus e encaminha ao Hiper",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.hiper_settings = hiper_settings
    fastapi_app.state.forward_order_use_case = create_forward_order_use_case(
        forwarder=forwarder,
        hiper_settings=hiper_settings,
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "integracao-hiper-mercus"})
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("Servidor de integração rodando na porta %s", settings.port)
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
