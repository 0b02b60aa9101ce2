"""Tasks de background do webhook WhatsApp.

Fire-and-forget: cada envelope vira uma task asyncio nomeada pelo
correlation_id. O conjunto de tasks vivas só existe para o shutdown
poder aguardá-las; não há limite de concorrência.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

TASK_NAME_PREFIX = "whatsapp-webhook"


class BackgroundTaskSet:
    """Tasks vivas; cada uma sai do conjunto ao terminar."""

    def __init__(self, name_prefix: str) -> None:
        self._name_prefix = name_prefix
        self._tasks: set[asyncio.Task[Any]] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    def spawn(
        self,
        coroutine: Coroutine[Any, Any, None],
        *,
        correlation_id: str,
    ) -> asyncio.Task[None]:
        task = asyncio.create_task(coroutine, name=f"{self._name_prefix}:{correlation_id}")
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "webhook_processing_task_failed",
                extra={"task_name": task.get_name(), "error_type": type(exc).__name__},
            )

    async def cancel_all(self, tasks: set[asyncio.Task[Any]] | None = None) -> int:
        """Cancela e aguarda as tasks dadas (padrão: todas as vivas)."""
        targets = set(self._tasks if tasks is None else tasks)
        for task in targets:
            task.cancel()
        if targets:
            await asyncio.gather(*targets, return_exceptions=True)
        return len(targets)

    async def drain(self, timeout_seconds: float) -> int:
        """Espera até `timeout_seconds`; cancela o que sobrar.

        Returns:
            Quantidade de tasks canceladas.
        """
        if not self._tasks:
            return 0

        logger.info(
            "webhook_processing_shutdown_wait",
            extra={"pending_tasks": len(self._tasks), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(set(self._tasks), timeout=timeout_seconds)
        if not pending:
            return 0

        cancelled = await self.cancel_all(pending)
        logger.warning("webhook_processing_shutdown_cancelled", extra={"cancelled_tasks": cancelled})
        return cancelled


_processing_tasks = BackgroundTaskSet(TASK_NAME_PREFIX)


def active_task_count() -> int:
    return len(_processing_tasks)


def schedule_processing_task(
    *,
    correlation_id: str,
    coroutine: Coroutine[Any, Any, None],
) -> asyncio.Task[None]:
    """Agenda o processamento e retorna a task criada."""
    task = _processing_tasks.spawn(coroutine, correlation_id=correlation_id)
    logger.info(
        "webhook_processing_scheduled",
        extra={"correlation_id": correlation_id, "active_tasks": len(_processing_tasks)},
    )
    return task


async def drain_processing_tasks(timeout_seconds: float = 30.0) -> int:
    return await _processing_tasks.drain(timeout_seconds)


async def cancel_processing_tasks() -> int:
    """Cancela todas as tasks vivas sem esperar timeout."""
    return await _processing_tasks.cancel_all()
