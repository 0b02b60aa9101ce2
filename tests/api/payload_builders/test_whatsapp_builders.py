"""Testes para api.payload_builders.whatsapp.

Cobre: base, text, template, media (4 tipos), interactive (botões e
lista), mark-as-read e factory.
"""

from __future__ import annotations

import pytest

from api.payload_builders.whatsapp.base import (
    build_base_payload,
    build_optional_header_footer,
)
from api.payload_builders.whatsapp.factory import build_full_payload, get_payload_builder
from api.payload_builders.whatsapp.interactive import (
    ButtonsPayloadBuilder,
    ListPayloadBuilder,
)
from api.payload_builders.whatsapp.media import (
    AudioPayloadBuilder,
    DocumentPayloadBuilder,
    ImagePayloadBuilder,
    VideoPayloadBuilder,
    _build_media_object,
)
from api.payload_builders.whatsapp.status import MarkReadPayloadBuilder
from app.constants.whatsapp import MediaType
from app.protocols.models import (
    ButtonsIntent,
    ListIntent,
    MarkReadIntent,
    MediaIntent,
    ReplyButton,
    TemplateIntent,
    TextIntent,
)

TO = "14155551234"


class TestBuildBasePayload:
    def test_contains_common_fields(self) -> None:
        assert build_base_payload(TO, "text") == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": TO,
            "type": "text",
        }

    def test_header_footer_only_when_non_empty(self) -> None:
        assert build_optional_header_footer("", "") == {}
        assert build_optional_header_footer("Head", "") == {
            "header": {"type": "text", "text": "Head"}
        }
        assert build_optional_header_footer("", "Foot") == {"footer": {"text": "Foot"}}


class TestTextPayload:
    def test_text_message_payload(self) -> None:
        path, body = build_full_payload(TextIntent(to=TO, body="Hi"))

        assert path == "/messages"
        assert body == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": TO,
            "type": "text",
            "text": {"preview_url": True, "body": "Hi"},
        }

    def test_preview_url_can_be_disabled(self) -> None:
        _, body = build_full_payload(TextIntent(to=TO, body="x", preview_url=False))
        assert body["text"]["preview_url"] is False


class TestTemplatePayload:
    def test_template_without_components_omits_key(self) -> None:
        _, body = build_full_payload(TemplateIntent(to=TO, name="hello_world"))

        assert body == {
            "messaging_product": "whatsapp",
            "to": TO,
            "type": "template",
            "template": {"name": "hello_world", "language": {"code": "en_US"}},
        }
        assert "recipient_type" not in body

    def test_template_with_components(self) -> None:
        components = [{"type": "body", "parameters": [{"type": "text", "text": "Ana"}]}]
        _, body = build_full_payload(
            TemplateIntent(to=TO, name="greet", language_code="pt_BR", components=components)
        )

        assert body["template"]["language"] == {"code": "pt_BR"}
        assert body["template"]["components"] == components


class TestMediaPayload:
    def test_media_object_omits_empty_fields(self) -> None:
        assert _build_media_object("https://x/a.png") == {"link": "https://x/a.png"}
        assert _build_media_object("u", caption="c", filename="") == {"link": "u", "caption": "c"}

    def test_image_with_caption(self) -> None:
        body = ImagePayloadBuilder().build(
            MediaIntent(to=TO, media_type=MediaType.IMAGE, url="https://x/a.png", caption="Look")
        )
        assert body["type"] == "image"
        assert body["image"] == {"link": "https://x/a.png", "caption": "Look"}

    def test_image_ignores_filename(self) -> None:
        body = ImagePayloadBuilder().build(
            MediaIntent(to=TO, media_type=MediaType.IMAGE, url="u", filename="a.png")
        )
        assert body["image"] == {"link": "u"}

    def test_video_with_caption(self) -> None:
        body = VideoPayloadBuilder().build(
            MediaIntent(to=TO, media_type=MediaType.VIDEO, url="u", caption="clip")
        )
        assert body["video"] == {"link": "u", "caption": "clip"}

    def test_document_carries_filename_and_caption(self) -> None:
        body = DocumentPayloadBuilder().build(
            MediaIntent(
                to=TO,
                media_type=MediaType.DOCUMENT,
                url="https://x/r.pdf",
                caption="Report",
                filename="r.pdf",
            )
        )
        assert body["document"] == {
            "link": "https://x/r.pdf",
            "caption": "Report",
            "filename": "r.pdf",
        }

    def test_document_caption_without_filename(self) -> None:
        body = DocumentPayloadBuilder().build(
            MediaIntent(
                to=TO,
                media_type=MediaType.DOCUMENT,
                url="https://x/r.pdf",
                caption="Report",
                filename="",
            )
        )
        assert body["document"] == {"link": "https://x/r.pdf", "caption": "Report"}

    def test_audio_never_carries_caption(self) -> None:
        body = AudioPayloadBuilder().build(
            MediaIntent(to=TO, media_type=MediaType.AUDIO, url="u", caption="ignored")
        )
        assert body["audio"] == {"link": "u"}

    @pytest.mark.parametrize("media_type", list(MediaType))
    def test_factory_dispatches_by_media_type(self, media_type: MediaType) -> None:
        _, body = build_full_payload(MediaIntent(to=TO, media_type=media_type, url="u"))
        assert body["type"] == media_type.value
        assert body[media_type.value]["link"] == "u"
        assert body["recipient_type"] == "individual"


class TestInteractivePayload:
    def test_buttons_default_ids_and_no_header_footer(self) -> None:
        body = ButtonsPayloadBuilder().build(
            ButtonsIntent(
                to=TO,
                body="Choose",
                buttons=[ReplyButton(title="Yes"), ReplyButton(title="No", id="no")],
            )
        )

        interactive = body["interactive"]
        assert body["type"] == "interactive"
        assert interactive["type"] == "button"
        assert interactive["body"] == {"text": "Choose"}
        assert interactive["action"]["buttons"] == [
            {"type": "reply", "reply": {"id": "btn_0", "title": "Yes"}},
            {"type": "reply", "reply": {"id": "no", "title": "No"}},
        ]
        assert "header" not in interactive
        assert "footer" not in interactive

    def test_buttons_without_ids_use_index(self) -> None:
        body = ButtonsPayloadBuilder().build(
            ButtonsIntent(
                to=TO,
                body="Choose",
                buttons=[ReplyButton(title="A"), ReplyButton(title="B"), ReplyButton(title="C")],
            )
        )

        ids = [button["reply"]["id"] for button in body["interactive"]["action"]["buttons"]]
        assert ids == ["btn_0", "btn_1", "btn_2"]

    def test_buttons_with_header_and_footer(self) -> None:
        body = ButtonsPayloadBuilder().build(
            ButtonsIntent(
                to=TO,
                body="b",
                buttons=[ReplyButton(title="A")],
                header="Menu",
                footer="Footer",
            )
        )
        assert body["interactive"]["header"] == {"type": "text", "text": "Menu"}
        assert body["interactive"]["footer"] == {"text": "Footer"}

    def test_list_payload(self) -> None:
        sections = [{"title": "S1", "rows": [{"id": "r1", "title": "Row 1"}]}]
        body = ListPayloadBuilder().build(
            ListIntent(to=TO, body="Pick", button_label="Options", sections=sections, footer="f")
        )

        interactive = body["interactive"]
        assert interactive["type"] == "list"
        assert interactive["action"] == {"button": "Options", "sections": sections}
        assert interactive["footer"] == {"text": "f"}
        assert "header" not in interactive


class TestMarkReadPayload:
    def test_mark_read_payload(self) -> None:
        body = MarkReadPayloadBuilder().build(MarkReadIntent(message_id="wamid.X"))
        assert body == {
            "messaging_product": "whatsapp",
            "status": "read",
            "message_id": "wamid.X",
        }

    def test_mark_read_uses_messages_path(self) -> None:
        path, _ = build_full_payload(MarkReadIntent(message_id="wamid.X"))
        assert path == "/messages"


class TestFactory:
    def test_unknown_intent_has_no_builder(self) -> None:
        assert get_payload_builder(object()) is None  # type: ignore[arg-type]

    def test_unknown_intent_raises(self) -> None:
        with pytest.raises(ValueError, match="não suportado"):
            build_full_payload(object())  # type: ignore[arg-type]

    def test_unknown_media_type_raises(self) -> None:
        intent = MediaIntent(to=TO, media_type="sticker", url="u")  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            build_full_payload(intent)

    def test_builders_return_fresh_dicts(self) -> None:
        intent = TextIntent(to=TO, body="x")
        _, first = build_full_payload(intent)
        first["text"]["body"] = "mutated"
        _, second = build_full_payload(intent)
        assert second["text"]["body"] == "x"
