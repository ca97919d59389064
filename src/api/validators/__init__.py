"""Validators — validação de payloads recebidos.

Estrutura:
- mercus/: pedido recebido no webhook do Mercus
"""

__all__: list[str] = []
