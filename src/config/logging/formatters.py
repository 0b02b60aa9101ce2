"""Formatters de logging.

JSON (python-json-logger) em qualquer ambiente implantado; texto legível
apenas para desenvolvimento local.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(service)s:%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "api.connectors.whatsapp.http_client",
            "message": "whatsapp_message_sent",
            "correlation_id": "abc-123",
            "service": "wa_cloud_bridge",
            "message_id": "wamid.HBg..."
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def create_text_formatter() -> logging.Formatter:
    """Formatter de texto simples (sem `extra`), para terminal local."""
    return logging.Formatter(TEXT_FORMAT)
