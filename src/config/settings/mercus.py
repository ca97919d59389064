"""Settings do Mercus (origem dos webhooks de pedido).

A chave de API ainda não é usada: o webhook de entrada não é autenticado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MERCUS_API_KEY: str = "SUA_CHAVE_DE_API_MERCUS"


@dataclass(frozen=True)
class MercusSettings:
    """Configurações do Mercus.

    Attributes:
        api_key: Chave de API do Mercus (reservada)
    """

    api_key: str = DEFAULT_MERCUS_API_KEY


def _load_from_env() -> MercusSettings:
    """Carrega MercusSettings a partir de variáveis de ambiente."""
    return MercusSettings(api_key=os.getenv("MERCUS_API_KEY", DEFAULT_MERCUS_API_KEY))

