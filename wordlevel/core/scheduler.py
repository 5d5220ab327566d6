"""
Input Scheduler — Debounce edits before re-checking text.

Each trigger cancels the pending call and schedules a new one after the
quiet period, so only the last edit of a burst is checked. A call that is
already running is never interrupted; its output is simply superseded by
the next one.

Timers come from a factory so the same debouncer works with threads
(default) or an asyncio event loop (loop_timer_factory).
"""

import asyncio
import threading
from typing import Any, Callable, Optional, Protocol

from wordlevel.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.SCHEDULE)


class Timer(Protocol):
    """A one-shot timer."""

    def start(self) -> None:
        ...

    def cancel(self) -> None:
        ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def thread_timer_factory(delay: float, fn: Callable[[], None]) -> Timer:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    return timer


class _LoopTimer:
    """Timer backed by loop.call_later."""

    def __init__(self, loop: asyncio.AbstractEventLoop, delay: float, fn: Callable[[], None]) -> None:
        self._loop = loop
        self._delay = delay
        self._fn = fn
        self._handle: Optional[asyncio.TimerHandle] = None

    def start(self) -> None:
        self._handle = self._loop.call_later(self._delay, self._fn)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()


def loop_timer_factory(loop: Optional[asyncio.AbstractEventLoop] = None) -> TimerFactory:
    """Timer factory scheduling on an asyncio loop (the running loop by default)."""

    def factory(delay: float, fn: Callable[[], None]) -> Timer:
        return _LoopTimer(loop or asyncio.get_running_loop(), delay, fn)

    return factory


class Debouncer:
    """
    Cancel-and-reschedule wrapper around a callback.

    trigger() records the latest arguments and restarts the quiet period.
    flush() runs a pending call immediately; cancel() drops it.
    """

    def __init__(
        self,
        delay_ms: int,
        callback: Callable[..., Any],
        timer_factory: Optional[TimerFactory] = None,
    ) -> None:
        self.delay_ms = delay_ms
        self._callback = callback
        self._timer_factory = timer_factory or thread_timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[Timer] = None
        self._pending: Optional[tuple[tuple, dict]] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """True while a call is waiting for its quiet period."""
        return self._pending is not None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        """Schedule callback(*args, **kwargs), superseding any pending call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = (args, kwargs)
            self._timer = self._timer_factory(self.delay_ms / 1000, lambda: self._fire(generation))
            self._timer.start()
        log.debug("debounce_scheduled", delay_ms=self.delay_ms, generation=generation)

    def cancel(self) -> bool:
        """Drop the pending call. Returns True if one was pending."""
        with self._lock:
            return self._take() is not None

    def flush(self) -> bool:
        """Run the pending call now. Returns True if one ran."""
        with self._lock:
            pending = self._take()
        if pending is None:
            return False
        args, kwargs = pending
        self._callback(*args, **kwargs)
        return True

    def _take(self) -> Optional[tuple[tuple, dict]]:
        # caller holds the lock
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        pending, self._pending = self._pending, None
        self._generation += 1
        return pending

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            args, kwargs = self._pending
            self._pending = None
            self._timer = None
        log.debug("debounce_fired", generation=generation)
        self._callback(*args, **kwargs)
