"""Factory de wiring para WhatsApp (bootstrap)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.whatsapp.http_client import create_whatsapp_http_client
from app.bootstrap.whatsapp_adapters import (
    GraphApiNormalizer,
    GraphApiOutboundSender,
    GraphApiPayloadBuilder,
)
from app.services.auto_reply import AutoReplyService
from app.use_cases.whatsapp.handle_inbound_event import HandleInboundEventUseCase
from app.use_cases.whatsapp.send_outbound_message import SendOutboundMessageUseCase

if TYPE_CHECKING:
    import httpx

    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from config.settings import WhatsAppSettings


@dataclass(frozen=True, slots=True)
class WhatsAppServices:
    """Dependências do canal criadas no startup e guardadas em app.state."""

    client: WhatsAppHttpClientProtocol
    outbound: SendOutboundMessageUseCase
    inbound: HandleInboundEventUseCase


def create_whatsapp_outbound_use_case(
    client: WhatsAppHttpClientProtocol,
) -> SendOutboundMessageUseCase:
    """Cria use case outbound com dependências injetadas."""
    return SendOutboundMessageUseCase(
        builder=GraphApiPayloadBuilder(),
        sender=GraphApiOutboundSender(client),
    )


def create_whatsapp_inbound_use_case(
    outbound: SendOutboundMessageUseCase,
) -> HandleInboundEventUseCase:
    """Cria use case inbound com auto-responder sobre o outbound."""
    return HandleInboundEventUseCase(
        normalizer=GraphApiNormalizer(),
        responder=AutoReplyService(outbound),
    )


def create_whatsapp_services(
    settings: WhatsAppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppServices:
    """Cria cliente e use cases do canal a partir das settings.

    Raises:
        ValueError: Se phone_number_id não estiver configurado
    """
    client = create_whatsapp_http_client(settings, transport=transport)
    outbound = create_whatsapp_outbound_use_case(client)
    return WhatsAppServices(
        client=client,
        outbound=outbound,
        inbound=create_whatsapp_inbound_use_case(outbound),
    )
