"""Router do Mercus — agrega os endpoints do webhook de pedidos."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.mercus.webhook import router as webhook_router

router = APIRouter()

router.include_router(webhook_router)
