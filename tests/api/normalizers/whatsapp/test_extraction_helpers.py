"""Testes dos helpers de extração por tipo de mensagem."""

from __future__ import annotations

from api.normalizers.whatsapp._extraction_helpers import (
    extract_button_content,
    extract_content,
    extract_interactive_content,
    extract_location_content,
    extract_media_content,
    extract_text_content,
)


def test_extract_text_content() -> None:
    assert extract_text_content({"text": {"body": "Hello"}}) == {"text": "Hello"}


def test_extract_text_content_missing_block() -> None:
    assert extract_text_content({"type": "text"}) == {}


def test_extract_image_content_keeps_only_present_fields() -> None:
    msg = {"image": {"id": "img-1", "mime_type": "image/jpeg", "sha256": "abc", "url": "x"}}

    assert extract_media_content(msg, "image") == {
        "id": "img-1",
        "mime_type": "image/jpeg",
        "sha256": "abc",
    }


def test_extract_document_content_includes_filename() -> None:
    msg = {
        "document": {
            "id": "doc-1",
            "filename": "report.pdf",
            "mime_type": "application/pdf",
            "caption": "Q3",
            "sha256": "h",
        }
    }

    assert extract_media_content(msg, "document") == {
        "id": "doc-1",
        "filename": "report.pdf",
        "mime_type": "application/pdf",
        "caption": "Q3",
        "sha256": "h",
    }


def test_extract_audio_content_has_no_caption() -> None:
    msg = {"audio": {"id": "a1", "mime_type": "audio/ogg", "sha256": "s", "caption": "x"}}

    assert extract_media_content(msg, "audio") == {
        "id": "a1",
        "mime_type": "audio/ogg",
        "sha256": "s",
    }


def test_extract_location_content() -> None:
    msg = {"location": {"latitude": -23.5, "longitude": -46.6, "name": "SP"}}

    assert extract_location_content(msg) == {"latitude": -23.5, "longitude": -46.6, "name": "SP"}


def test_extract_interactive_button_reply() -> None:
    msg = {"interactive": {"type": "button_reply", "button_reply": {"id": "b1", "title": "Yes"}}}

    assert extract_interactive_content(msg) == {"button_id": "b1", "button_title": "Yes"}


def test_extract_interactive_list_reply() -> None:
    msg = {
        "interactive": {
            "type": "list_reply",
            "list_reply": {"id": "row-1", "title": "Row", "description": "Desc"},
        }
    }

    assert extract_interactive_content(msg) == {
        "list_id": "row-1",
        "list_title": "Row",
        "list_description": "Desc",
    }


def test_extract_interactive_other_keeps_raw_block() -> None:
    block = {"type": "nfm_reply", "nfm_reply": {"response_json": "{}"}}

    assert extract_interactive_content({"interactive": block}) == {"interactive": block}


def test_extract_button_content() -> None:
    msg = {"button": {"text": "Stop promotions", "payload": "STOP"}}

    assert extract_button_content(msg) == {"button_text": "Stop promotions", "button_payload": "STOP"}


def test_extract_content_unknown_type_keeps_raw_element() -> None:
    msg = {"type": "sticker", "sticker": {"id": "s1"}}

    assert extract_content(msg, "sticker") == {"raw": msg}


def test_extract_content_missing_type_keeps_raw_element() -> None:
    msg = {"from": "1"}

    assert extract_content(msg, None) == {"raw": msg}
