"""Agregador de settings da integração Mercus → Hiper.

Cada integração tem seu próprio módulo de settings; todos são dataclasses
imutáveis carregadas de variáveis de ambiente e cacheadas.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.hiper import (
    DEFAULT_HIPER_API_ENDPOINT,
    DEFAULT_HIPER_API_KEY,
    HiperSettings,
    get_hiper_settings,
)
from config.settings.mercus import (
    DEFAULT_MERCUS_API_KEY,
    MercusSettings,
)

__all__ = [
    "DEFAULT_HIPER_API_ENDPOINT",
    "DEFAULT_HIPER_API_KEY",
    "DEFAULT_MERCUS_API_KEY",
    "BaseSettings",
    "Environment",
    "HiperSettings",
    "MercusSettings",
    "get_base_settings",
    "get_hiper_settings",
]
