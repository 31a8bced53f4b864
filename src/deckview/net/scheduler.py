"""Runs blocking fetches off the frame thread and delivers results on it.

Work is submitted into a :class:`FetchCycle`; one cycle spans one navigation.
Completed futures are queued by the worker threads and only handed to their
callbacks when :meth:`FetchScheduler.pump` runs, which the scheduler does on
every ``EVENT_TICK``. Callbacks therefore always run on the frame thread and
may touch ECS components directly.

Starting a new cycle cancels the previous one: queued futures are cancelled
outright and results of futures that were already running are dropped when
they arrive, so a superseded navigation can never write into the UI.
"""
from __future__ import annotations

import logging
import queue
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from deckview.events.bus import EVENT_TICK, EventBus

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[BaseException], None]


class FetchCycle:
    """Cancellable group of futures started for one navigation."""

    def __init__(self, cycle_id: int) -> None:
        self.cycle_id = cycle_id
        self._futures: list[Future] = []
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def pending(self) -> int:
        return sum(1 for f in self._futures if not f.done())

    def track(self, future: Future) -> None:
        self._futures = [f for f in self._futures if not f.done()]
        self._futures.append(future)

    def cancel(self) -> int:
        """Cancel queued futures and mark the cycle dead. Returns how many were cancelled."""
        self._cancelled = True
        cancelled = 0
        for future in self._futures:
            if future.cancel():
                cancelled += 1
        self._futures.clear()
        return cancelled

    def __repr__(self) -> str:
        return f"FetchCycle(id={self.cycle_id}, cancelled={self._cancelled})"


class FetchScheduler:
    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        executor: Executor | None = None,
        max_workers: int = 4,
    ) -> None:
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="deckview-fetch",
        )
        self._completed: "queue.SimpleQueue[tuple]" = queue.SimpleQueue()
        self._next_cycle_id = 1
        self._cycle = FetchCycle(0)
        if event_bus is not None:
            event_bus.subscribe(EVENT_TICK, self._on_tick)

    @property
    def current_cycle(self) -> FetchCycle:
        return self._cycle

    def begin_cycle(self) -> FetchCycle:
        """Abandon the running cycle and open a fresh one."""
        previous = self._cycle
        dropped = previous.cancel()
        if dropped:
            logger.debug("Cycle %s abandoned, %d queued fetches cancelled", previous.cycle_id, dropped)
        self._cycle = FetchCycle(self._next_cycle_id)
        self._next_cycle_id += 1
        return self._cycle

    def submit(
        self,
        fn: Callable[..., Any],
        *args: Any,
        on_success: SuccessCallback,
        on_error: Optional[ErrorCallback] = None,
        cycle: FetchCycle | None = None,
    ) -> Future | None:
        """Run ``fn(*args)`` on a worker; returns None if the cycle is already dead."""
        target = cycle or self._cycle
        if target.cancelled:
            return None
        future = self._executor.submit(fn, *args)
        target.track(future)
        future.add_done_callback(
            lambda f: self._completed.put((target, f, on_success, on_error))
        )
        return future

    def pump(self) -> int:
        """Deliver finished fetches on the calling thread. Returns how many were delivered."""
        delivered = 0
        while True:
            try:
                cycle, future, on_success, on_error = self._completed.get_nowait()
            except queue.Empty:
                break
            if cycle.cancelled or future.cancelled():
                logger.debug("Dropping result of abandoned cycle %s", cycle.cycle_id)
                continue
            delivered += 1
            exc = future.exception()
            try:
                if exc is None:
                    on_success(future.result())
                elif on_error is not None:
                    on_error(exc)
                else:
                    logger.error("Fetch failed: %s", exc)
            except Exception:
                logger.exception("Fetch completion handler failed")
        return delivered

    def shutdown(self) -> None:
        self._cycle.cancel()
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def _on_tick(self, sender, **payload) -> None:
        self.pump()
