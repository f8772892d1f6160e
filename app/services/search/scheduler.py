"""Refresh scheduler - the single periodic timer behind live updates."""

import asyncio
from collections.abc import Callable
from enum import StrEnum

from loguru import logger

from settings import REFRESH_INTERVAL


class SchedulerState(StrEnum):
    """Scheduler lifecycle states."""

    STOPPED = "stopped"
    RUNNING = "running"


class RefreshScheduler:
    """Runs ``tick`` immediately on start and then every ``period`` seconds until stopped.

    Only the timer is cancelled on stop; work the tick spawned keeps running.
    """

    def __init__(self, tick: Callable[[], None], period: float = REFRESH_INTERVAL):
        self._tick = tick
        self.period = period
        self._task: asyncio.Task | None = None
        self.ticks = 0

    @property
    def state(self) -> SchedulerState:
        return SchedulerState.RUNNING if self._task is not None else SchedulerState.STOPPED

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        """Stopped -> Running. No-op if already running."""
        if self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="refresh-scheduler")
        logger.info("Refresh scheduler started (every {}s)", self.period)

    def stop(self) -> None:
        """Running -> Stopped. No-op if already stopped."""
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.info("Refresh scheduler stopped after {} ticks", self.ticks)

    async def _run(self) -> None:
        while True:
            self.ticks += 1
            try:
                self._tick()
            except Exception as e:
                logger.exception("Refresh tick failed: {}", e)
            await asyncio.sleep(self.period)
