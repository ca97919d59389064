"""Erros da API do Hiper e extração de detalhes para a resposta ao chamador."""

from __future__ import annotations

import json
from typing import Any

from api.connectors.http_base import HttpError

# Chaves onde APIs REST costumam colocar a mensagem de erro
_DETAIL_KEYS = ("message", "mensagem", "error", "erro", "detail", "details")


class HiperApiError(HttpError):
    """Hiper respondeu com status fora de 2xx."""

    def __init__(self, status_code: int, body: Any = None) -> None:
        super().__init__(
            f"Hiper API respondeu com status {status_code}",
            status_code=status_code,
            body=body,
        )


def _detail_from_body(body: Any) -> str | None:
    if isinstance(body, str):
        return body.strip() or None

    if isinstance(body, dict):
        for key in _DETAIL_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            if isinstance(value, dict):
                nested = _detail_from_body(value)
                if nested:
                    return nested
        return json.dumps(body, ensure_ascii=False) if body else None

    if isinstance(body, list) and body:
        return json.dumps(body, ensure_ascii=False)

    return None


def extract_error_details(exc: BaseException) -> str:
    """Retorna detalhe não vazio do erro.

    Usa o corpo da resposta de erro do Hiper quando existir; senão a
    mensagem da exceção; em último caso o nome da classe.
    """
    detail = _detail_from_body(getattr(exc, "body", None))
    return detail or str(exc) or type(exc).__name__
