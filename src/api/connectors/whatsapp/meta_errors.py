"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNKNOWN_ERROR_TYPE = "unknown_error"


@dataclass(frozen=True)
class WhatsAppApiError:
    """Resumo de um erro da Meta, usado apenas para logging."""

    error_type: str
    error_code: int | None
    error_message: str


def parse_meta_error(error_obj: dict[str, Any] | None) -> WhatsAppApiError | None:
    """Extrai tipo, código e mensagem do objeto `error` da Meta.

    Args:
        error_obj: Objeto de erro (body["error"] ou erro sintético)

    Returns:
        WhatsAppApiError, ou None se não houver erro
    """
    if not error_obj or not isinstance(error_obj, dict):
        return None

    code = error_obj.get("code")
    return WhatsAppApiError(
        error_type=str(error_obj.get("type", UNKNOWN_ERROR_TYPE)),
        error_code=code if isinstance(code, int) else None,
        error_message=str(error_obj.get("message", "")),
    )


def build_unknown_error(message: str) -> dict[str, Any]:
    """Erro sintético para falhas sem objeto de erro da Meta."""
    return {"message": message, "type": UNKNOWN_ERROR_TYPE}
