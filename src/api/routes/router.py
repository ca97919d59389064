"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.mercus.router import router as mercus_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health na raiz (/health)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        mercus_router,
        prefix="/webhook",
        tags=["mercus"],
    )

    return api_router
