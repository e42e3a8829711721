"""
Named timer mixin

Adds start/end timers and timing wrappers to logger classes via mixin
pattern. Timer results are reported through the logger's own ``info`` and
``warn`` methods, so they obey the current threshold.
"""

from __future__ import annotations

import inspect
import time as _time
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Dict, Iterator, Optional, TypeVar, Union

T = TypeVar("T")


class TimerMixin:
    """
    Mixin to add named timers to logger.

    The host class provides ``info`` and ``warn`` and calls
    ``_init_timers`` from its constructor, as Logger does.

    Start instants come from a monotonic clock, never the wall clock used
    for line timestamps.
    """

    # Monotonic clock in seconds; replaceable per instance
    _clock: Callable[[], float] = staticmethod(_time.perf_counter)

    def _init_timers(self) -> None:
        """Initialize the label to start-instant mapping."""
        self._timers: Dict[str, float] = {}

    def start_timer(self, label: str) -> None:
        """
        Start (or restart) the timer named ``label``.

        Restarting an unfinished timer silently replaces its start instant.
        """
        self._timers[label] = self._clock()

    def end_timer(self, label: str) -> Optional[float]:
        """
        Stop the timer named ``label`` and log its duration at info level.

        Args:
            label: Timer name given to start_timer

        Returns:
            Elapsed milliseconds, or None when no such timer was running
        """
        if label not in self._timers:
            self.warn(f"No timer found for label: {label}")
            return None

        elapsed_ms = (self._clock() - self._timers.pop(label)) * 1000.0
        self.info(f"Timer [{label}]: {elapsed_ms:.2f} ms")
        return elapsed_ms

    async def time(
        self,
        label: str,
        work: Union[Awaitable[T], Callable[[], Union[Awaitable[T], T]]],
    ) -> T:
        """
        Time an awaitable unit of work.

        The timer is ended whether the work returns, raises or is
        cancelled; exceptions propagate unchanged.

        Args:
            label: Timer name
            work: Awaitable, or callable returning an awaitable or a value

        Returns:
            Result of the work
        """
        self.start_timer(label)
        try:
            result = work if inspect.isawaitable(work) else work()
            if inspect.isawaitable(result):
                result = await result
            return result
        finally:
            self.end_timer(label)

    @contextmanager
    def timed(self, label: str) -> Iterator[Any]:
        """
        Time a block of synchronous work.

        Example:
            with logger.timed("load"):
                load_everything()
        """
        self.start_timer(label)
        try:
            yield self
        finally:
            self.end_timer(label)

    @property
    def active_timers(self) -> Dict[str, float]:
        """Copy of the running timers and their start instants."""
        return dict(self._timers)
