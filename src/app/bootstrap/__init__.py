"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, create_forward_order_use_case

    initialize_app()
    use_case = create_forward_order_use_case()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import (
    create_forward_order_use_case,
    create_hiper_order_forwarder,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    BaseSettings,
    HiperSettings,
    get_base_settings,
    get_hiper_settings,
)

logger = logging.getLogger(__name__)

__all__ = [
    "create_forward_order_use_case",
    "create_hiper_order_forwarder",
    "initialize_app",
    "validate_runtime_settings",
]


def initialize_app(settings: BaseSettings | None = None) -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    base = settings or get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(
    base_settings: BaseSettings | None = None,
    hiper_settings: HiperSettings | None = None,
) -> list[str]:
    """Valida settings obrigatórias no startup.

    Em staging/production falha rápido; em development apenas alerta.

    Returns:
        Lista de erros encontrados (vazia = OK).

    Raises:
        RuntimeError: Se houver erros em ambiente estrito.
    """
    base = base_settings or get_base_settings()
    hiper = hiper_settings or get_hiper_settings()

    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"hiper: {error}" for error in hiper.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
