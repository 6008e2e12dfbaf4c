"""Coalesce document change notifications into sequential refresh cycles.

At most one cycle runs at a time. Notifications arriving while a cycle runs
collapse into a single follow-up cycle, so the last edit is always rendered
and no two tool invocations overlap.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_DELAY = 0.1


class SchedulerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    RUNNING_WITH_PENDING = "running_with_pending"


def on_notify(state: SchedulerState) -> tuple[SchedulerState, bool]:
    """Return the next state and whether a new cycle must be started."""
    if state is SchedulerState.IDLE:
        return SchedulerState.RUNNING, True
    return SchedulerState.RUNNING_WITH_PENDING, False


def on_cycle_finished(state: SchedulerState) -> tuple[SchedulerState, bool]:
    """Return the next state and whether the queued notification must be replayed."""
    return SchedulerState.IDLE, state is SchedulerState.RUNNING_WITH_PENDING


class UpdateScheduler:
    def __init__(
        self,
        refresh: Callable[[], Awaitable[object]],
        settle_delay: float = DEFAULT_SETTLE_DELAY,
    ) -> None:
        self._refresh = refresh
        self._settle_delay = settle_delay
        self._state = SchedulerState.IDLE
        self._task: asyncio.Task[None] | None = None
        self._idle = asyncio.Event()
        self._idle.set()
        self.cycles = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    def notify_changed(self) -> None:
        self._state, start = on_notify(self._state)
        if start:
            self._idle.clear()
            self._task = asyncio.get_running_loop().create_task(self._run_cycle())

    async def _run_cycle(self) -> None:
        try:
            await asyncio.sleep(self._settle_delay)
            await self._refresh()
        except asyncio.CancelledError:
            self._state = SchedulerState.IDLE
            self._idle.set()
            raise
        except Exception:
            logger.exception("Refresh cycle failed")
        self.cycles += 1
        self._state, restart = on_cycle_finished(self._state)
        if restart:
            self.notify_changed()
        else:
            self._task = None
            self._idle.set()

    async def wait_idle(self) -> None:
        await self._idle.wait()

    async def close(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
