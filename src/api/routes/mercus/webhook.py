"""Webhook de pedidos do Mercus.

Endpoint:
- POST /webhook/mercus-order: recebe o pedido, traduz e encaminha ao Hiper

Respostas:
- 200 {"status": "sucesso", "hiperResponse": ...}
- 400 {"error": ...} para id_pedido ausente ou JSON inválido
- 500 {"error": ..., "details": ...} para pedido malformado ou falha no envio ao Hiper
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.hiper.errors import extract_error_details
from api.connectors.http_base import HttpError
from api.connectors.mercus.webhook import InvalidJsonError, parse_webhook_body
from api.validators.mercus import (
    ORDER_ID_FIELD,
    MercusOrderMappingError,
    MissingOrderIdError,
)
from app.observability import correlation_scope

if TYPE_CHECKING:
    from app.use_cases.mercus import ForwardMercusOrderUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

SUCCESS_STATUS = "sucesso"
INTEGRATION_ERROR_MESSAGE = "Erro ao processar integração"
INVALID_JSON_MESSAGE = "Payload JSON inválido."


def _get_use_case(request: Request) -> ForwardMercusOrderUseCase:
    return request.app.state.forward_order_use_case


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    content: dict[str, Any] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(content=content, status_code=status_code)


@router.post("/mercus-order", response_model=None)
async def receive_mercus_order(request: Request) -> JSONResponse:
    """Recebe pedido do Mercus e encaminha ao Hiper.

    Fluxo: parse JSON → valida id_pedido → traduz → POST no Hiper.
    Nenhuma etapa é refeita em caso de falha.
    """
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        raw_body = await request.body()
        try:
            payload = parse_webhook_body(raw_body)
        except InvalidJsonError:
            logger.warning(
                "mercus_order_json_invalid",
                extra={"payload_size": len(raw_body)},
            )
            return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_JSON_MESSAGE)

        order_id = payload.get(ORDER_ID_FIELD) if isinstance(payload, dict) else None
        logger.info(
            "mercus_order_received",
            extra={"id_pedido": order_id, "payload_size": len(raw_body)},
        )
        logger.debug("mercus_order_payload", extra={"payload": payload})

        try:
            response = await _get_use_case(request).execute(payload)
        except MissingOrderIdError as exc:
            logger.warning("mercus_order_missing_id", extra={"error": str(exc)})
            return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))
        except MercusOrderMappingError as exc:
            logger.error(
                "mercus_order_malformed",
                extra={"id_pedido": order_id, "error": str(exc)},
            )
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                INTEGRATION_ERROR_MESSAGE,
                details=str(exc),
            )
        except HttpError as exc:
            details = extract_error_details(exc)
            logger.error(
                "hiper_forward_failed",
                extra={
                    "id_pedido": order_id,
                    "status_code": exc.status_code,
                    "details": details,
                },
            )
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                INTEGRATION_ERROR_MESSAGE,
                details=details,
            )
        except Exception as exc:
            logger.exception("hiper_forward_unexpected_error", extra={"id_pedido": order_id})
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                INTEGRATION_ERROR_MESSAGE,
                details=extract_error_details(exc),
            )

        logger.info(
            "hiper_order_forwarded",
            extra={"id_pedido": order_id, "status_code": response.status_code},
        )
        logger.debug("hiper_order_response", extra={"hiper_response": response.body})

        return JSONResponse(
            content={"status": SUCCESS_STATUS, "hiperResponse": response.body},
            status_code=status.HTTP_200_OK,
            headers={"x-correlation-id": correlation_id},
        )
