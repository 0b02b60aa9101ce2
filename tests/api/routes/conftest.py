"""Fixtures compartilhadas pelos testes de rota."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest
from starlette.requests import Request

RequestFactory = Callable[..., Request]


def _build_request(
    *,
    method: str,
    path: str = "/",
    query_string: str = "",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    services: Any = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": query_string.encode("utf-8"),
        "headers": raw_headers,
        "app": SimpleNamespace(state=SimpleNamespace(whatsapp_services=services)),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def build_request() -> RequestFactory:
    """Factory de Request Starlette com app.state.whatsapp_services."""
    return _build_request
