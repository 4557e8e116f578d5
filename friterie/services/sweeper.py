"""Background task that expires in-memory auth state on a schedule."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Protocol

from friterie.utils.time import Clock, utc_now

logger = logging.getLogger(__name__)

TICK_SECONDS: float = 30.0


class Sweepable(Protocol):
    sweep_interval: timedelta

    def sweep(self, now: datetime | None = None) -> int: ...


class PeriodicSweeper:
    """Call ``sweep(now)`` on each store once its interval has elapsed.

    ``run_due`` holds the scheduling logic so it can be driven by tests with a
    fake clock; ``start`` wraps it in an asyncio loop for the running app.
    """

    def __init__(self, stores: Sequence[Sweepable], clock: Clock = utc_now, tick_seconds: float = TICK_SECONDS) -> None:
        self._stores = list(stores)
        self._clock = clock
        self._tick_seconds = tick_seconds
        started = clock()
        self._next_due: list[datetime] = [started + store.sweep_interval for store in self._stores]
        self._task: asyncio.Task[None] | None = None

    def run_due(self, now: datetime | None = None) -> int:
        current = now or self._clock()
        removed = 0
        for index, store in enumerate(self._stores):
            if current < self._next_due[index]:
                continue
            removed += store.sweep(current)
            self._next_due[index] = current + store.sweep_interval
        return removed

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self._tick_seconds)
            try:
                self.run_due()
            except Exception:
                logger.exception("[SWEEP] sweep failed; will retry on next tick")

    def start(self) -> None:
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self._loop())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
