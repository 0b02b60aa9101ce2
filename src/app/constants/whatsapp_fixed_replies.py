"""Respostas fixas do auto-responder de WhatsApp.

Comandos de texto são avaliados na ordem de FIXED_REPLIES, por
substring case-insensitive (o primeiro que casar vence).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from app.constants.whatsapp import MessageType


@dataclass(frozen=True, slots=True)
class FixedReplyConfig:
    """Configuração de uma resposta fixa.

    Atributos:
        key: Identificador interno da resposta.
        triggers: Substrings disparadoras (minúsculas).
        response_text: Texto enviado; vazio quando a resposta não é texto.
        kind: text (resposta de texto), clock (hora atual) ou menu (botões).
    """

    key: str
    triggers: tuple[str, ...]
    response_text: str
    kind: Literal["text", "clock", "menu"] = "text"


HELP_TEXT = (
    "🤖 *Available Commands:*\n"
    "\n"
    '• Send "hello" - Get a greeting\n'
    '• Send "time" - Get current time\n'
    '• Send "help" - Show this message\n'
    '• Send "menu" - Show interactive menu\n'
    "• Send anything else - Echo response"
)

FIXED_REPLIES: tuple[FixedReplyConfig, ...] = (
    FixedReplyConfig(
        key="greeting",
        triggers=("hello", "hi"),
        response_text="👋 Hello! How can I help you today?",
    ),
    FixedReplyConfig(
        key="help",
        triggers=("help",),
        response_text=HELP_TEXT,
    ),
    FixedReplyConfig(
        key="time",
        triggers=("time",),
        response_text="🕐 Current time: {now}",
        kind="clock",
    ),
    FixedReplyConfig(
        key="menu",
        triggers=("menu",),
        response_text="",
        kind="menu",
    ),
)

ECHO_TEMPLATE = 'You said: "{text}"\n\nType *help* to see available commands.'

# Menu interativo (comando "menu")
MENU_BODY = "Please choose an option:"
MENU_HEADER = "🤖 Main Menu"
MENU_FOOTER = "Powered by WhatsApp API"
MENU_OPTIONS: tuple[tuple[str, str], ...] = (
    ("option_1", "📊 View Stats"),
    ("option_2", "❓ Get Help"),
    ("option_3", "📞 Contact Us"),
)

# Confirmações fixas por tipo de mídia recebida
MEDIA_ACKNOWLEDGEMENTS: dict[str, str] = {
    MessageType.IMAGE: "📷 Thanks for the image!",
    MessageType.VIDEO: "🎥 Video received!",
    MessageType.DOCUMENT: "📄 Document received!",
    MessageType.AUDIO: "🎵 Audio received!",
}

LOCATION_TEMPLATE = "📍 Location received: {latitude}, {longitude}"
BUTTON_CLICK_TEMPLATE = "You clicked: {title}"
