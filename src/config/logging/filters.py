"""Filters e helpers de logging para contexto e PII.

Campos injetados em todo record:
- correlation_id: ID de rastreamento da requisição
- service: nome do serviço
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_NON_DIGITS = re.compile(r"\D")


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def mask_phone(phone: str | None, visible: int = 4) -> str:
    """Mascara número de telefone para logs, mantendo só os últimos dígitos.

    Exemplo:
        mask_phone("+55 (11) 99999-1234") -> "*********1234"
    """
    if not phone:
        return ""
    digits = _NON_DIGITS.sub("", phone)
    if len(digits) <= visible:
        return "*" * len(digits)
    return "*" * (len(digits) - visible) + digits[-visible:]
