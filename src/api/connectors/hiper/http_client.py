"""Cliente HTTP especializado para a API de pedidos do Hiper.

Estende HttpClient com:
- Autenticação Bearer e Content-Type JSON
- Decodificação do corpo (JSON, ou texto quando não for JSON)
- Conversão de status fora de 2xx em HiperApiError
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.hiper.errors import HiperApiError
from api.connectors.http_base import HttpClient, HttpClientConfig
from app.protocols.models import ForwardedOrderResponse

if TYPE_CHECKING:
    import httpx

    from config.settings import HiperSettings

logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HiperHttpClient(HttpClient):
    """Cliente HTTP da API do Hiper."""

    async def send_order(
        self,
        endpoint: str,
        api_key: str,
        payload: dict[str, Any],
    ) -> ForwardedOrderResponse:
        """Envia um pedido traduzido ao Hiper.

        Args:
            endpoint: URL da API de pedidos
            api_key: Bearer token
            payload: Pedido no formato Hiper

        Returns:
            Status e corpo da resposta do Hiper

        Raises:
            ValueError: Se api_key está vazio
            HiperApiError: Se o Hiper responder com status fora de 2xx
            HttpConnectionError: Se a chamada falhar antes de haver resposta
        """
        if not api_key or not api_key.strip():
            logger.error("hiper_api_key_missing", extra={"endpoint": endpoint})
            raise ValueError(
                "api_key é obrigatório para envio de pedidos. "
                "Verifique se HIPER_API_KEY está configurado."
            )

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        response = await self.post(endpoint, json=payload, headers=headers)
        body = _decode_body(response)

        if not response.is_success:
            logger.warning(
                "hiper_api_error",
                extra={"endpoint": endpoint, "status_code": response.status_code},
            )
            raise HiperApiError(response.status_code, body)

        logger.info(
            "hiper_api_success",
            extra={"endpoint": endpoint, "status_code": response.status_code},
        )
        return ForwardedOrderResponse(status_code=response.status_code, body=body)


def create_hiper_http_client(
    settings: HiperSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HiperHttpClient:
    """Factory do cliente Hiper com timeout vindo das settings."""
    from config.settings import get_hiper_settings

    hiper = settings or get_hiper_settings()
    config = HttpClientConfig(timeout_seconds=hiper.request_timeout_seconds)
    return HiperHttpClient(config=config, transport=transport)
