"""Conector Mercus — adapter de entrada para webhooks de pedido."""

from .models import MercusCliente, MercusImpostos, MercusOrder, MercusProduto
from .webhook import InvalidJsonError, parse_webhook_body

__all__ = [
    "InvalidJsonError",
    "MercusCliente",
    "MercusImpostos",
    "MercusOrder",
    "MercusProduto",
    "parse_webhook_body",
]
