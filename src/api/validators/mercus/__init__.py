"""Validação do pedido recebido do Mercus.

Uso:
    from api.validators.mercus import validate_mercus_order, MercusOrderMappingError

    order = validate_mercus_order(payload)
"""

from api.validators.mercus.errors import MercusOrderMappingError, MissingOrderIdError
from api.validators.mercus.order import ORDER_ID_FIELD, require_order_id, validate_mercus_order

__all__ = [
    "ORDER_ID_FIELD",
    "MercusOrderMappingError",
    "MissingOrderIdError",
    "require_order_id",
    "validate_mercus_order",
]
