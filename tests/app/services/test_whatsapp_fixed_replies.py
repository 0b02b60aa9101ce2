"""Testes para respostas fixas do auto-responder."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from app.constants.whatsapp_fixed_replies import HELP_TEXT
from app.services.whatsapp_fixed_replies import format_utc_time, match_fixed_reply

_FIXED_NOW = datetime(2026, 10, 19, 15, 4, 5, tzinfo=UTC)


@pytest.mark.parametrize("text", ["hello", "Hello there", "HI", "oi, hi!"])
def test_greeting(text: str) -> None:
    reply = match_fixed_reply(text)

    assert reply.key == "greeting"
    assert reply.response_text == "👋 Hello! How can I help you today?"


def test_greeting_matches_substring_inside_words() -> None:
    assert match_fixed_reply("this is it").key == "greeting"


def test_help() -> None:
    reply = match_fixed_reply("  HELP  ")

    assert reply.key == "help"
    assert reply.response_text == HELP_TEXT


def test_greeting_wins_over_later_commands() -> None:
    assert match_fixed_reply("hello, what time is it?").key == "greeting"


def test_time_uses_injected_clock() -> None:
    reply = match_fixed_reply("time", clock=lambda: _FIXED_NOW)

    assert reply.key == "time"
    assert reply.kind == "text"
    assert reply.response_text == "🕐 Current time: Monday, October 19, 2026 at 3:04:05 PM UTC"


def test_menu() -> None:
    reply = match_fixed_reply("Menu")

    assert reply.key == "menu"
    assert reply.kind == "menu"


def test_echo_keeps_original_text() -> None:
    reply = match_fixed_reply("Quero ajuda")

    assert reply.key == "echo"
    assert reply.response_text == (
        'You said: "Quero ajuda"\n\nType *help* to see available commands.'
    )


def test_format_utc_time_converts_timezone() -> None:
    local = datetime(2026, 1, 2, 0, 30, 0, tzinfo=timezone(timedelta(hours=-3)))

    assert format_utc_time(local) == "Friday, January 2, 2026 at 3:30:00 AM UTC"


def test_format_utc_time_midnight_is_twelve() -> None:
    midnight = datetime(2026, 10, 19, 0, 0, 9, tzinfo=UTC)

    assert format_utc_time(midnight) == "Monday, October 19, 2026 at 12:00:09 AM UTC"
