from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Protocol


class TimerHandle(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...

    def join(self, timeout: float | None = None) -> None: ...


TimerFactory = Callable[[float, Callable[..., Any]], TimerHandle]


class Debouncer:
    """Run ``callback`` once a burst of triggers has been quiet for ``delay`` seconds.

    Every ``trigger`` cancels the pending timer and schedules a fresh one, so only
    the arguments of the last call in a burst reach the callback.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        delay: float,
        *,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.callback = callback
        self.delay = delay
        self._timer_factory = timer_factory or _daemon_timer
        self._lock = threading.Lock()
        self._timer: TimerHandle | None = None
        self._latest: TimerHandle | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            timer = self._timer_factory(self.delay, lambda: self._fire(generation, args, kwargs))
            self._timer = timer
            self._latest = timer
        timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1

    def wait(self, timeout: float | None = None) -> None:
        """Block until the pending call (if any) has fired or been cancelled."""
        with self._lock:
            timer = self._latest
        if timer is not None:
            timer.join(timeout)

    def _fire(self, generation: int, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        with self._lock:
            # A cancel() that raced with the timer thread wins.
            if generation != self._generation:
                return
            self._timer = None
        self.callback(*args, **kwargs)


def _daemon_timer(delay: float, function: Callable[..., Any]) -> TimerHandle:
    timer = threading.Timer(delay, function)
    timer.daemon = True
    return timer
