"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="wa_cloud_bridge")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("whatsapp_message_sent", extra={"message_id": "wamid.1"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "wa_cloud_bridge"

LogFormat = Literal["json", "text"]


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    log_format: LogFormat = "json",
) -> None:
    """Configura o root logger do serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).
    Substitui handlers existentes para evitar duplicação.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id do contexto.
        log_format: "json" (padrão) ou "text".

    Raises:
        ValueError: Se o nível ou o formato de log forem inválidos.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    if log_format not in ("json", "text"):
        raise ValueError(f"Formato de log inválido: {log_format}")

    formatter = create_json_formatter() if log_format == "json" else create_text_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (o filter injeta service e correlation_id)."""
    return logging.getLogger(name)
