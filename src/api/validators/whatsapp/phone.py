"""Normalização e validação de números de telefone (formato internacional)."""

from __future__ import annotations

import re

from api.validators.whatsapp.errors import ValidationError

_NON_DIGITS = re.compile(r"[^0-9]")
_VALID_PHONE = re.compile(r"^[0-9]{10,15}$")

DEFAULT_PHONE_ERROR = "Invalid phone number format"


def format_phone_number(phone_number: str | None) -> str:
    """Remove tudo que não é dígito (+, espaços, hífens, parênteses).

    Exemplo:
        format_phone_number("+1 (415) 555-1234") -> "14155551234"
    """
    if not phone_number:
        return ""
    return _NON_DIGITS.sub("", str(phone_number))


def is_valid_phone_number(phone_number: str | None) -> bool:
    """True se, após formatação, o número tiver entre 10 e 15 dígitos."""
    return bool(_VALID_PHONE.match(format_phone_number(phone_number)))


def normalize_phone_number(
    phone_number: str | None,
    error_message: str = DEFAULT_PHONE_ERROR,
) -> str:
    """Formata e valida o número, retornando apenas dígitos.

    Raises:
        ValidationError: Se o número não tiver 10 a 15 dígitos
    """
    formatted = format_phone_number(phone_number)
    if not _VALID_PHONE.match(formatted):
        raise ValidationError(error_message)
    return formatted
