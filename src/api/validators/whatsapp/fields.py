"""Validação de campos obrigatórios e de tipo de mídia."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.whatsapp.errors import ValidationError
from app.constants.whatsapp import MediaType

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

VALID_MEDIA_TYPES: tuple[str, ...] = tuple(media_type.value for media_type in MediaType)


def find_missing_fields(data: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    """Campos ausentes ou vazios (None, "", 0, [] contam como ausentes)."""
    return [name for name in required if not data.get(name)]


def validate_required_fields(data: Mapping[str, Any], required: Sequence[str]) -> None:
    """Raises:
    ValidationError: "Missing required fields: a, b"
    """
    missing = find_missing_fields(data, required)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def validate_media_type(media_type: Any) -> MediaType:
    """Converte string em MediaType.

    Raises:
        ValidationError: Se não for image, video, document ou audio
    """
    if isinstance(media_type, str) and media_type in VALID_MEDIA_TYPES:
        return MediaType(media_type)
    raise ValidationError(
        f"Invalid media type. Must be one of: {', '.join(VALID_MEDIA_TYPES)}"
    )
