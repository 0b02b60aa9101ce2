"""Handshake de assinatura do webhook (GET com hub.* na query string)."""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SUBSCRIBE_MODE = "subscribe"


class WebhookChallengeError(ValueError):
    """Handshake recusado (token não configurado ou não confere)."""


@dataclass(frozen=True, slots=True)
class WebhookChallenge:
    """Parâmetros hub.* enviados pela Meta."""

    mode: str | None
    verify_token: str | None
    challenge: str | None

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> WebhookChallenge:
        return cls(
            mode=params.get("hub.mode"),
            verify_token=params.get("hub.verify_token"),
            challenge=params.get("hub.challenge"),
        )


def verify_webhook_challenge(challenge: WebhookChallenge, expected_token: str | None) -> str:
    """Confere modo e token; devolve o texto a ecoar (vazio sem hub.challenge).

    Raises:
        WebhookChallengeError: "missing_verify_token" sem token no servidor,
            "verification_failed" para modo ou token divergentes
    """
    if not expected_token:
        raise WebhookChallengeError("missing_verify_token")

    token_matches = hmac.compare_digest(
        (challenge.verify_token or "").encode("utf-8"),
        expected_token.encode("utf-8"),
    )
    if challenge.mode != SUBSCRIBE_MODE or not token_matches:
        raise WebhookChallengeError("verification_failed")

    return challenge.challenge or ""
