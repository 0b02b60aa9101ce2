"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.whatsapp.meta_errors import parse_meta_error

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


def log_meta_error(
    error_obj: dict[str, Any] | None,
    method: str,
    operation: str,
    status_code: int | None = None,
) -> None:
    """Loga erro da Meta sem expor payload nem token."""
    meta_error = parse_meta_error(error_obj)
    logger.warning(
        "whatsapp_api_error",
        extra={
            "method": method,
            "operation": operation,
            "status_code": status_code,
            "error_type": meta_error.error_type if meta_error else None,
            "error_code": meta_error.error_code if meta_error else None,
        },
    )


def log_success(
    method: str,
    operation: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "whatsapp_api_success",
        extra={
            "method": method,
            "operation": operation,
            "status_code": status_code,
        },
    )
