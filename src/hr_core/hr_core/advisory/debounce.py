from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Set

from ..core.constants import DEFAULT_DEBOUNCE_SECONDS
from ..core.exceptions import AdvisoryUnavailableError
from .model import Advisory, LeaveQuery

logger = logging.getLogger(__name__)

Fetch = Callable[[LeaveQuery], Awaitable[Optional[Advisory]]]
ResultCallback = Callable[[Optional[Advisory]], None]


class AdvisoryDebouncer:
    """Cancel-and-replace scheduler for advisory lookups.

    Each `submit` restarts the timer and bumps a generation counter. A timer
    that is still waiting is cancelled outright; a lookup already in flight
    is left alone, but its reply is dropped unless its generation is still
    the newest one. `close` drops everything, for when the owning view goes
    away.

    Must be used from inside a running event loop.
    """

    def __init__(
        self,
        fetch: Fetch,
        *,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        on_result: Optional[ResultCallback] = None,
    ) -> None:
        self._fetch = fetch
        self._delay = delay
        self._on_result = on_result

        self._generation = 0
        self._timer: Optional[asyncio.Task] = None
        self._inflight: Set[asyncio.Task] = set()
        self._checking_generation: Optional[int] = None
        self._result: Optional[Advisory] = None
        self._closed = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def result(self) -> Optional[Advisory]:
        return self._result

    @property
    def is_checking(self) -> bool:
        return self._timer is not None or self._checking_generation == self._generation

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, query: LeaveQuery) -> int:
        if self._closed:
            raise RuntimeError("AdvisoryDebouncer is closed")

        self._cancel_timer()
        self._generation += 1
        # The previous advisory described other inputs.
        self._result = None
        generation = self._generation
        self._timer = asyncio.get_running_loop().create_task(self._fire(generation, query))
        return generation

    def reset(self) -> None:
        """Forget the current advisory without closing (inputs became incomplete)."""
        self._cancel_timer()
        self._generation += 1
        self._result = None

    def close(self) -> None:
        self._closed = True
        self._generation += 1
        self._cancel_timer()
        for task in list(self._inflight):
            task.cancel()
        self._inflight.clear()

    async def drain(self) -> None:
        """Wait until no timer or lookup is outstanding."""
        tasks = [t for t in (self._timer, *self._inflight) if t is not None]
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def _fire(self, generation: int, query: LeaveQuery) -> None:
        await asyncio.sleep(self._delay)

        task = asyncio.current_task()
        # From here on submit() no longer cancels this task.
        if self._timer is task:
            self._timer = None
        if task is not None:
            self._inflight.add(task)
        self._checking_generation = generation

        try:
            try:
                result = await self._fetch(query)
            except AdvisoryUnavailableError as exc:
                logger.warning("Advisory unavailable: %s", exc)
                result = None
            except Exception:
                logger.exception("Advisory lookup failed")
                result = None
        finally:
            if task is not None:
                self._inflight.discard(task)
            if self._checking_generation == generation:
                self._checking_generation = None

        if self._closed or generation != self._generation:
            logger.debug("Discarding stale advisory (generation %s, current %s)", generation, self._generation)
            return

        self._result = result
        if self._on_result is not None:
            self._on_result(result)
