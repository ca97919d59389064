"""Parse do corpo bruto do webhook de pedido do Mercus."""

from __future__ import annotations

import json
from typing import Any


class InvalidJsonError(ValueError):
    """Corpo do webhook não é JSON válido."""


def parse_webhook_body(raw_body: bytes) -> Any:
    """Decodifica o corpo do webhook.

    Corpo vazio vira ``{}``. O formato do objeto é validado depois, em
    ``api.validators.mercus``.

    Raises:
        InvalidJsonError: Se o corpo não for JSON válido
    """
    try:
        return json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc
