"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_base_payload
from app.constants.whatsapp import MessageType

if TYPE_CHECKING:
    from app.protocols.models import TextIntent


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, intent: TextIntent) -> dict[str, Any]:
        """Constrói payload de texto (preview de links habilitado por padrão).

        Args:
            intent: Intent de texto

        Returns:
            Payload de texto conforme API Meta
        """
        return {
            **build_base_payload(intent.to, MessageType.TEXT),
            "text": {
                "preview_url": intent.preview_url,
                "body": intent.body,
            },
        }
