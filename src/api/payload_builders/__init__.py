"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- hiper/: pedido no formato da API do Hiper
"""

__all__: list[str] = []
