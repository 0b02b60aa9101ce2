"""Configuração de logging estruturado.

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Logs nunca carregam payloads brutos, tokens ou telefones sem máscara.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, mask_phone
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
    "mask_phone",
]
