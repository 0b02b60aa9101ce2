"""Builders para mensagens de mídia enviadas por link.

Um builder explícito por tipo: cada um decide quais campos opcionais
aceita, sem chave dinâmica nem mutação de objeto parcial.
- image/video: caption
- document: caption e filename
- audio: apenas link
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_base_payload
from app.constants.whatsapp import MediaType

if TYPE_CHECKING:
    from app.protocols.models import MediaIntent


def _build_media_object(
    url: str,
    caption: str | None = None,
    filename: str | None = None,
) -> dict[str, Any]:
    """Monta objeto de mídia; campos vazios são omitidos."""
    media_obj: dict[str, Any] = {"link": url}
    if caption:
        media_obj["caption"] = caption
    if filename:
        media_obj["filename"] = filename
    return media_obj


class ImagePayloadBuilder:
    """Builder para imagens."""

    def build(self, intent: MediaIntent) -> dict[str, Any]:
        return {
            **build_base_payload(intent.to, MediaType.IMAGE),
            "image": _build_media_object(intent.url, caption=intent.caption),
        }


class VideoPayloadBuilder:
    """Builder para vídeos."""

    def build(self, intent: MediaIntent) -> dict[str, Any]:
        return {
            **build_base_payload(intent.to, MediaType.VIDEO),
            "video": _build_media_object(intent.url, caption=intent.caption),
        }


class DocumentPayloadBuilder:
    """Builder para documentos (único tipo com filename)."""

    def build(self, intent: MediaIntent) -> dict[str, Any]:
        return {
            **build_base_payload(intent.to, MediaType.DOCUMENT),
            # A Cloud API aceita caption em documentos; manter junto do filename
            "document": _build_media_object(
                intent.url,
                caption=intent.caption,
                filename=intent.filename,
            ),
        }


class AudioPayloadBuilder:
    """Builder para áudio (sem caption nem filename)."""

    def build(self, intent: MediaIntent) -> dict[str, Any]:
        return {
            **build_base_payload(intent.to, MediaType.AUDIO),
            "audio": _build_media_object(intent.url),
        }
