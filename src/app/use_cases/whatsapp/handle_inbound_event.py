"""Use case para processamento de eventos inbound do webhook."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import InboundMessageEvent, MessageStatusEvent
from config.logging import mask_phone

if TYPE_CHECKING:
    from app.protocols.models import NormalizedEvent
    from app.protocols.normalizer import WebhookNormalizerProtocol
    from app.services.auto_reply import AutoReplyService

logger = logging.getLogger(__name__)


class HandleInboundEventUseCase:
    """Normaliza o envelope e despacha mensagem ou status.

    - Mensagem: delegada ao auto-responder
    - Status: apenas logado (sem persistência)
    - Envelope irrelevante/malformado: ignorado
    """

    def __init__(
        self,
        normalizer: WebhookNormalizerProtocol,
        responder: AutoReplyService,
    ) -> None:
        self._normalizer = normalizer
        self._responder = responder

    async def execute(self, envelope: Any) -> NormalizedEvent:
        event = self._normalizer.normalize(envelope)

        if isinstance(event, InboundMessageEvent):
            logger.info(
                "whatsapp_message_received",
                extra={
                    "message_id": event.message_id,
                    "message_type": event.message_type,
                    "from": mask_phone(event.from_number),
                },
            )
            await self._responder.handle_message(event)
        elif isinstance(event, MessageStatusEvent):
            logger.info(
                "whatsapp_status_received",
                extra={
                    "message_id": event.message_id,
                    "status": event.status,
                    "recipient": mask_phone(event.recipient_id),
                    "error_count": len(event.errors or []),
                },
            )
        else:
            logger.info("webhook_event_ignored")

        return event
