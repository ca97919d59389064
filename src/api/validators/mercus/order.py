"""Validadores do pedido Mercus."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from api.connectors.mercus.models import MercusOrder
from api.validators.mercus.errors import MercusOrderMappingError, MissingOrderIdError

ORDER_ID_FIELD = "id_pedido"


def require_order_id(payload: Any) -> Any:
    """Retorna ``id_pedido`` se presente e não vazio.

    Raises:
        MissingOrderIdError: Se payload não é objeto ou id_pedido é falsy
    """
    if not isinstance(payload, dict) or not payload.get(ORDER_ID_FIELD):
        raise MissingOrderIdError(f'O campo "{ORDER_ID_FIELD}" é obrigatório.')
    return payload[ORDER_ID_FIELD]


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "pedido"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def validate_mercus_order(payload: Any) -> MercusOrder:
    """Valida a estrutura do pedido Mercus.

    Args:
        payload: Corpo JSON decodificado do webhook

    Returns:
        MercusOrder validado

    Raises:
        MissingOrderIdError: Se id_pedido ausente ou vazio
        MercusOrderMappingError: Se cliente/produtos malformados
    """
    require_order_id(payload)
    try:
        return MercusOrder.model_validate(payload)
    except ValidationError as exc:
        raise MercusOrderMappingError(_format_validation_error(exc)) from exc
