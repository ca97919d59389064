"""Configuração do pytest para a integração Mercus → Hiper."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def mercus_order_payload() -> dict[str, Any]:
    """Pedido Mercus completo, sem impostos."""
    return {
        "id_pedido": "1",
        "data": "2025-04-10T14:30:00Z",
        "cliente": {
            "id": "C1",
            "nome": "A",
            "endereco": "X",
            "telefone": "1",
            "email": "a@a.com",
        },
        "produtos": [
            {
                "id_produto": "P1",
                "descricao": "D",
                "quantidade": 2,
                "preco_unitario": 5,
                "gtin": "G",
            }
        ],
        "total": 10,
        "condicao_pagamento": "avista",
    }
