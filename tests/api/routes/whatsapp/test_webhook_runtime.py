"""Testes para helpers runtime do webhook WhatsApp."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from api.routes.whatsapp import webhook_runtime


class _RecordingUseCase:
    def __init__(self, error: Exception | None = None) -> None:
        self.envelopes: list[Any] = []
        self._error = error

    async def execute(self, envelope: Any) -> None:
        self.envelopes.append(envelope)
        if self._error is not None:
            raise self._error


@pytest.mark.asyncio
async def test_dispatch_inbound_processing_inline_mode_runs_before_returning() -> None:
    use_case = _RecordingUseCase()

    await webhook_runtime.dispatch_inbound_processing(
        payload={"entry": []},
        correlation_id="corr-inline",
        settings=SimpleNamespace(webhook_processing_mode="inline"),
        use_case=use_case,  # type: ignore[arg-type]
    )

    assert use_case.envelopes == [{"entry": []}]


@pytest.mark.asyncio
async def test_dispatch_inbound_processing_async_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def _fake_schedule(*, correlation_id: str, coroutine: Any) -> None:
        captured["correlation_id"] = correlation_id
        coroutine.close()

    monkeypatch.setattr(webhook_runtime, "schedule_processing_task", _fake_schedule)

    await webhook_runtime.dispatch_inbound_processing(
        payload={"entry": []},
        correlation_id="corr-async",
        settings=SimpleNamespace(webhook_processing_mode="async"),
        use_case=_RecordingUseCase(),  # type: ignore[arg-type]
    )

    assert captured == {"correlation_id": "corr-async"}


@pytest.mark.asyncio
async def test_dispatch_without_use_case_logs_and_returns(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level("WARNING"):
        await webhook_runtime.dispatch_inbound_processing(
            payload={},
            correlation_id="corr-none",
            settings=SimpleNamespace(webhook_processing_mode="inline"),
            use_case=None,
        )

    assert "webhook_use_case_unavailable" in caplog.text


@pytest.mark.asyncio
async def test_process_inbound_payload_safe_logs_and_swallows_failure(
    caplog: pytest.LogCaptureFixture,
) -> None:
    use_case = _RecordingUseCase(error=RuntimeError("send exploded"))

    with caplog.at_level("ERROR"):
        await webhook_runtime.process_inbound_payload_safe(
            payload={"object": "whatsapp_business_account"},
            correlation_id="corr-fail",
            use_case=use_case,  # type: ignore[arg-type]
        )

    assert "webhook_processing_failed" in caplog.text
    assert len(use_case.envelopes) == 1
