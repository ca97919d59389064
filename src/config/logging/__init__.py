"""Logging estruturado (JSON) da integração.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="integracao-hiper-mercus")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("hiper_order_forwarded", extra={"status_code": 201})

Todo log carrega: asctime, level, logger, message, service, correlation_id.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
