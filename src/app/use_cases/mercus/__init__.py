"""Use cases do webhook de pedidos do Mercus."""

from .forward_order import ForwardMercusOrderUseCase

__all__ = ["ForwardMercusOrderUseCase"]
