"""Settings da API de pedidos do Hiper (destino da integração)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_HIPER_API_ENDPOINT: str = "https://api.hiper.com.br/v1/pedidos"
DEFAULT_HIPER_API_KEY: str = "SUA_CHAVE_DE_API_HIPER"


@dataclass(frozen=True)
class HiperSettings:
    """Configurações de acesso à API do Hiper.

    Attributes:
        api_endpoint: URL que recebe o POST do pedido traduzido
        api_key: Bearer token enviado em ``Authorization``
        request_timeout_seconds: Timeout da chamada HTTP
    """

    api_endpoint: str = DEFAULT_HIPER_API_ENDPOINT
    api_key: str = DEFAULT_HIPER_API_KEY
    request_timeout_seconds: float = 30.0

    @property
    def uses_placeholder_key(self) -> bool:
        """True enquanto o token padrão de exemplo estiver em uso."""
        return self.api_key == DEFAULT_HIPER_API_KEY

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Hiper.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_endpoint.startswith(("http://", "https://")):
            errors.append("HIPER_API_ENDPOINT deve ser uma URL http(s)")

        if not self.api_key:
            errors.append("HIPER_API_KEY não configurado")
        elif self.uses_placeholder_key:
            errors.append("HIPER_API_KEY ainda usa o valor de exemplo")

        if self.request_timeout_seconds <= 0:
            errors.append("HIPER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> HiperSettings:
    """Carrega HiperSettings a partir de variáveis de ambiente."""
    return HiperSettings(
        api_endpoint=os.getenv("HIPER_API_ENDPOINT", DEFAULT_HIPER_API_ENDPOINT),
        api_key=os.getenv("HIPER_API_KEY", DEFAULT_HIPER_API_KEY),
        request_timeout_seconds=float(os.getenv("HIPER_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_hiper_settings() -> HiperSettings:
    """Retorna instância cacheada de HiperSettings."""
    return _load_from_env()
