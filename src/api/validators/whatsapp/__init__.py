"""Validadores de requests de envio WhatsApp.

Uso:
    from api.validators.whatsapp import (
        ValidationError,
        normalize_phone_number,
        validate_required_fields,
    )

    validate_required_fields(body, ["to", "message"])
    to = normalize_phone_number(body["to"])
"""

from api.validators.whatsapp.errors import ValidationError
from api.validators.whatsapp.fields import (
    VALID_MEDIA_TYPES,
    find_missing_fields,
    validate_media_type,
    validate_required_fields,
)
from api.validators.whatsapp.phone import (
    format_phone_number,
    is_valid_phone_number,
    normalize_phone_number,
)

__all__ = [
    "VALID_MEDIA_TYPES",
    "ValidationError",
    "find_missing_fields",
    "format_phone_number",
    "is_valid_phone_number",
    "normalize_phone_number",
    "validate_media_type",
    "validate_required_fields",
]
