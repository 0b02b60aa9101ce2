"""Settings base (ambiente, serviço, logging)."""

from __future__ import annotations

from config.settings.base.core import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
    parse_environment,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "Environment",
    "get_base_settings",
    "parse_environment",
]
