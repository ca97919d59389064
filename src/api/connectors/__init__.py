"""Connectors por plataforma — adapters de borda.

Estrutura:
- http_base.py: cliente HTTP genérico (httpx)
- mercus/: webhook de entrada e modelos do pedido Mercus
- hiper/: cliente HTTP, modelos e erros da API do Hiper
"""

__all__: list[str] = []
