"""Testes de wiring: webhook -> normalizer -> auto-responder -> Graph API."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from app.bootstrap.whatsapp_factory import WhatsAppServices, create_whatsapp_services
from app.protocols.models import InboundMessageEvent
from config.settings import WhatsAppSettings

_SETTINGS = WhatsAppSettings(verify_token="v", access_token="tok", phone_number_id="555")


def _text_envelope(text: str) -> dict[str, Any]:
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": "WABA",
                "changes": [
                    {
                        "field": "messages",
                        "value": {
                            "messaging_product": "whatsapp",
                            "metadata": {"phone_number_id": "555"},
                            "contacts": [{"wa_id": "14155551234", "profile": {"name": "Ana"}}],
                            "messages": [
                                {
                                    "from": "14155551234",
                                    "id": "wamid.IN",
                                    "timestamp": "1700000000",
                                    "type": "text",
                                    "text": {"body": text},
                                }
                            ],
                        },
                    }
                ],
            }
        ],
    }


class GraphApiRecorder:
    """Handler do MockTransport que guarda as requisições recebidas."""

    def __init__(self) -> None:
        self.requests: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((str(request.url), json.loads(request.content)))
        return httpx.Response(200, json={"messages": [{"id": "wamid.OUT"}], "success": True})


@pytest.fixture
def recorder() -> GraphApiRecorder:
    return GraphApiRecorder()


@pytest.fixture
def services(recorder: GraphApiRecorder) -> WhatsAppServices:
    return create_whatsapp_services(_SETTINGS, transport=httpx.MockTransport(recorder))


@pytest.mark.asyncio
async def test_inbound_text_is_marked_read_and_answered(
    services: WhatsAppServices,
    recorder: GraphApiRecorder,
) -> None:
    event = await services.inbound.execute(_text_envelope("help"))

    assert isinstance(event, InboundMessageEvent)
    assert event.contact == {"wa_id": "14155551234", "profile": {"name": "Ana"}}

    urls = [url for url, _ in recorder.requests]
    assert urls == ["https://graph.facebook.com/v21.0/555/messages"] * 2

    mark_read, reply = (body for _, body in recorder.requests)
    assert mark_read == {
        "messaging_product": "whatsapp",
        "status": "read",
        "message_id": "wamid.IN",
    }
    assert reply["to"] == "14155551234"
    assert reply["type"] == "text"
    assert reply["text"]["body"].startswith("🤖 *Available Commands:*")


@pytest.mark.asyncio
async def test_outbound_shortcut_uses_same_client(
    services: WhatsAppServices,
    recorder: GraphApiRecorder,
) -> None:
    result = await services.outbound.send_text("14155551234", "Olá")

    assert result.success is True
    assert result.message_id == "wamid.OUT"
    assert recorder.requests[0][1]["text"] == {"preview_url": True, "body": "Olá"}


def test_missing_phone_number_id_raises() -> None:
    with pytest.raises(ValueError, match="phone_number_id"):
        create_whatsapp_services(WhatsAppSettings(access_token="tok"))
