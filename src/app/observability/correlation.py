"""correlation_id por requisição, propagado para os logs.

Usa ContextVar para isolar requisições concorrentes no mesmo event loop.

Uso:
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """correlation_id ativo, ou string vazia fora de uma requisição."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Ativa correlation_id (ou um novo) e devolve o token para desfazer."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Volta ao correlation_id anterior ao ``set_correlation_id``."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Mantém um correlation_id ativo durante o bloco ``with``.

    Header ausente ou vazio gera um id novo. Ao sair, o valor anterior
    é restaurado mesmo em caso de exceção.
    """
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
