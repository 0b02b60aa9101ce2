"""Testes para endpoints da rota de webhook WhatsApp."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest

from api.routes.whatsapp import webhook


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    fake = SimpleNamespace(verify_token="token", webhook_processing_mode="inline")
    monkeypatch.setattr(webhook, "get_whatsapp_settings", lambda: fake)
    return fake


@pytest.mark.asyncio
async def test_verify_webhook_success(settings: SimpleNamespace, build_request: Any) -> None:
    request = build_request(
        method="GET",
        query_string="hub.mode=subscribe&hub.verify_token=token&hub.challenge=abc",
    )
    response = await webhook.verify_webhook(request)

    assert response.status_code == 200
    assert response.body == b"abc"
    assert response.media_type == "text/plain"


@pytest.mark.asyncio
async def test_verify_webhook_invalid_token(settings: SimpleNamespace, build_request: Any) -> None:
    request = build_request(
        method="GET",
        query_string="hub.mode=subscribe&hub.verify_token=wrong&hub.challenge=abc",
    )
    response = await webhook.verify_webhook(request)

    assert response.status_code == 403
    assert json.loads(response.body) == {"error": "Verification failed"}


@pytest.mark.asyncio
async def test_verify_webhook_without_configured_token(
    monkeypatch: pytest.MonkeyPatch,
    build_request: Any,
) -> None:
    monkeypatch.setattr(webhook, "get_whatsapp_settings", lambda: SimpleNamespace(verify_token=""))

    request = build_request(
        method="GET",
        query_string="hub.mode=subscribe&hub.verify_token=&hub.challenge=abc",
    )
    response = await webhook.verify_webhook(request)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_receive_webhook_success(
    settings: SimpleNamespace,
    build_request: Any,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured: dict[str, object] = {}
    inbound = object()

    async def _fake_dispatch(
        *,
        payload: object,
        correlation_id: str,
        settings: object,
        use_case: object,
    ) -> None:
        captured["payload"] = payload
        captured["correlation_id"] = correlation_id
        captured["use_case"] = use_case

    monkeypatch.setattr(webhook, "dispatch_inbound_processing", _fake_dispatch)

    request = build_request(
        method="POST",
        body=b'{"object": "whatsapp_business_account", "entry": []}',
        headers={"x-correlation-id": "cid-123"},
        services=SimpleNamespace(inbound=inbound),
    )

    response = await webhook.receive_webhook(request)

    assert response.status_code == 200
    assert json.loads(response.body) == {"success": True}
    assert captured == {
        "payload": {"object": "whatsapp_business_account", "entry": []},
        "correlation_id": "cid-123",
        "use_case": inbound,
    }


@pytest.mark.asyncio
async def test_receive_webhook_without_services_still_acknowledges(
    settings: SimpleNamespace,
    build_request: Any,
) -> None:
    request = build_request(method="POST", body=b"{}")

    response = await webhook.receive_webhook(request)

    assert response.status_code == 200
    assert json.loads(response.body) == {"success": True}


@pytest.mark.asyncio
async def test_receive_webhook_dispatch_failure_returns_500(
    settings: SimpleNamespace,
    build_request: Any,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def _raise_dispatch(**kwargs: object) -> None:
        raise RuntimeError("dispatch failed")

    monkeypatch.setattr(webhook, "dispatch_inbound_processing", _raise_dispatch)

    request = build_request(method="POST", body=b'{"entry": []}')
    response = await webhook.receive_webhook(request)

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_receive_webhook_invalid_json(
    settings: SimpleNamespace,
    build_request: Any,
) -> None:
    request = build_request(method="POST", body=b"{invalid}")
    response = await webhook.receive_webhook(request)

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Invalid JSON"}
