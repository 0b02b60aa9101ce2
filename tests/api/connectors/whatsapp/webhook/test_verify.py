"""Testes do handshake de verificação do webhook."""

from __future__ import annotations

import pytest

from api.connectors.whatsapp.webhook.verify import (
    WebhookChallenge,
    WebhookChallengeError,
    verify_webhook_challenge,
)


def _challenge(
    mode: str | None = "subscribe",
    token: str | None = "token",
    value: str | None = "abc123",
) -> WebhookChallenge:
    return WebhookChallenge(mode=mode, verify_token=token, challenge=value)


def test_from_query_params_reads_hub_fields() -> None:
    params = {"hub.mode": "subscribe", "hub.verify_token": "t", "hub.challenge": "42"}

    assert WebhookChallenge.from_query_params(params) == WebhookChallenge("subscribe", "t", "42")
    assert WebhookChallenge.from_query_params({}) == WebhookChallenge(None, None, None)


def test_matching_token_returns_challenge() -> None:
    assert verify_webhook_challenge(_challenge(), expected_token="token") == "abc123"


def test_without_challenge_returns_empty() -> None:
    assert verify_webhook_challenge(_challenge(value=None), expected_token="token") == ""


def test_missing_server_token() -> None:
    with pytest.raises(WebhookChallengeError, match="missing_verify_token"):
        verify_webhook_challenge(_challenge(token=""), expected_token=None)


@pytest.mark.parametrize(
    "challenge",
    [
        _challenge(token="wrong"),
        _challenge(token=None),
        _challenge(mode="unsubscribe"),
        _challenge(mode=None),
    ],
)
def test_verification_failed(challenge: WebhookChallenge) -> None:
    with pytest.raises(WebhookChallengeError, match="verification_failed"):
        verify_webhook_challenge(challenge, expected_token="token")
