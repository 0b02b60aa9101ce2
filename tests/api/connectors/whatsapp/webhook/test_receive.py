import json

import pytest

from api.connectors.whatsapp.webhook.receive import (
    InvalidJsonError,
    WebhookRequestError,
    parse_webhook_body,
)


def test_parse_webhook_body_ok() -> None:
    body = json.dumps({"object": "whatsapp_business_account", "entry": []}).encode("utf-8")

    assert parse_webhook_body(body) == {"object": "whatsapp_business_account", "entry": []}


def test_parse_webhook_body_empty_is_empty_object() -> None:
    assert parse_webhook_body(b"") == {}


def test_parse_webhook_body_keeps_non_object_json() -> None:
    assert parse_webhook_body(b"[1, 2]") == [1, 2]


def test_parse_webhook_body_invalid_json() -> None:
    with pytest.raises(InvalidJsonError):
        parse_webhook_body(b"{invalid")


def test_invalid_json_error_is_webhook_request_error() -> None:
    with pytest.raises(WebhookRequestError):
        parse_webhook_body(b"\xff\xfe")
