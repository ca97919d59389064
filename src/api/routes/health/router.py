"""Endpoint de liveness."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

HEALTH_MESSAGE = "API de integração funcionando."

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> PlainTextResponse:
    """Liveness probe — sem dependências externas."""
    return PlainTextResponse(HEALTH_MESSAGE)
