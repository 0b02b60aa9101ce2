"""Agregador de settings do serviço.

Re-exporta settings base e settings do canal WhatsApp.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "BaseSettings",
    "Environment",
    "WhatsAppSettings",
    "get_base_settings",
    "get_whatsapp_settings",
]
