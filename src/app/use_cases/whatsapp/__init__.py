"""Casos de uso do canal WhatsApp."""

from app.use_cases.whatsapp.handle_inbound_event import HandleInboundEventUseCase
from app.use_cases.whatsapp.send_outbound_message import SendOutboundMessageUseCase

__all__ = [
    "HandleInboundEventUseCase",
    "SendOutboundMessageUseCase",
]
