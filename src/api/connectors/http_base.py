"""Cliente HTTP base para conectores da camada API.

Uma requisição por chamada, sem retry: falhas sobem para o chamador.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis.

    Attributes:
        status_code: Status HTTP da resposta, quando houve resposta.
        body: Corpo decodificado da resposta de erro, quando houver.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class HttpConnectionError(HttpError):
    """Falha de rede ou timeout antes de obter resposta."""


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Args:
        config: Timeout, headers padrão e verificação SSL.
        transport: Transport httpx alternativo (ex.: ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa um POST JSON e retorna a resposta, qualquer que seja o status.

        Raises:
            HttpConnectionError: Timeout ou falha de rede.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"timeout_seconds": self._config.timeout_seconds})
            raise HttpConnectionError(
                f"Timeout após {self._config.timeout_seconds}s ao chamar {url}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise HttpConnectionError(
                f"Falha de conexão com {url}: {type(exc).__name__}: {exc}"
            ) from exc
