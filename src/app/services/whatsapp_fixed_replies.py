"""Serviço determinístico para respostas fixas de comandos de texto."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal

from app.constants.whatsapp_fixed_replies import ECHO_TEMPLATE, FIXED_REPLIES, FixedReplyConfig

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class FixedReply:
    """Resposta resolvida para um texto recebido."""

    key: str
    response_text: str
    kind: Literal["text", "menu"]


def match_fixed_reply(
    user_message: str,
    clock: Callable[[], datetime] | None = None,
) -> FixedReply:
    """Resolve a resposta para um texto; sem comando, ecoa o texto.

    Args:
        user_message: Texto recebido (original, sem normalização)
        clock: Fonte de data/hora UTC (injetável em testes)

    Returns:
        FixedReply do primeiro comando que casar, ou eco
    """
    normalized = _normalize_text(user_message)
    for config in FIXED_REPLIES:
        if any(trigger in normalized for trigger in config.triggers):
            return _to_reply(config, clock)
    return FixedReply(
        key="echo",
        response_text=ECHO_TEMPLATE.format(text=user_message),
        kind="text",
    )


def format_utc_time(now: datetime) -> str:
    """Formata data/hora por extenso em UTC.

    Exemplo:
        "Monday, October 19, 2026 at 3:04:05 PM UTC"
    """
    now_utc = now.astimezone(UTC)
    hour_12 = now_utc.hour % 12 or 12
    return (
        f"{now_utc:%A}, {now_utc:%B} {now_utc.day}, {now_utc:%Y} "
        f"at {hour_12}:{now_utc:%M:%S %p} UTC"
    )


def _to_reply(
    config: FixedReplyConfig,
    clock: Callable[[], datetime] | None,
) -> FixedReply:
    if config.kind == "clock":
        now = clock() if clock else datetime.now(UTC)
        return FixedReply(
            key=config.key,
            response_text=config.response_text.format(now=format_utc_time(now)),
            kind="text",
        )
    if config.kind == "menu":
        return FixedReply(key=config.key, response_text="", kind="menu")
    return FixedReply(key=config.key, response_text=config.response_text, kind="text")


def _normalize_text(text: str) -> str:
    return (text or "").strip().lower()
