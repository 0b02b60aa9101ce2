"""Builder para confirmação de leitura (mark as read)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.whatsapp import MESSAGING_PRODUCT, MessageStatus

if TYPE_CHECKING:
    from app.protocols.models import MarkReadIntent


class MarkReadPayloadBuilder:
    """Builder de status "read" para uma mensagem recebida."""

    def build(self, intent: MarkReadIntent) -> dict[str, Any]:
        return {
            "messaging_product": MESSAGING_PRODUCT,
            "status": MessageStatus.READ,
            "message_id": intent.message_id,
        }
