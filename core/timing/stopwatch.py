"""Start/stop/lap stopwatch on top of the monotonic clock.

Invalid calls never raise: they return :data:`REJECTED` and leave the
counters alone. The reason for the most recent rejected ``start``/``stop``/
``lap`` is kept on :attr:`Stopwatch.last_rejection`.

A stopwatch has one owner. Callers sharing an instance across threads must
guard it with their own lock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import ulid

from core.timing.clock import now_monotonic_ns, seconds_between
from core.timing.snapshot import StopwatchSnapshot

logger = logging.getLogger(__name__)

REJECTED = -1.0


class Rejection(str, Enum):
    ALREADY_RUNNING = "already_running"
    NOT_RUNNING = "not_running"


def new_stopwatch_name() -> str:
    return str(ulid.new())


@dataclass
class Stopwatch:
    name: str = field(default_factory=new_stopwatch_name)
    origin_ns: int = field(default=0, init=False)
    # None while idle
    interval_start: Optional[float] = field(default=None, init=False)
    last_timepoint: float = field(default=0.0, init=False)
    last_rejection: Optional[Rejection] = field(default=None, init=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)
    _laps: list[float] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.origin_ns = now_monotonic_ns()

    # ------------------------------------------------------------------
    # Clock
    # ------------------------------------------------------------------
    def current_timepoint(self) -> float:
        """Seconds since construction, with sub-second precision."""
        return seconds_between(self.origin_ns, now_monotonic_ns())

    def _observe(self) -> float:
        tp = self.current_timepoint()
        self.last_timepoint = tp
        return tp

    def _reject(self, reason: Rejection, op: str) -> float:
        self.last_rejection = reason
        logger.debug("stopwatch %s: %s rejected (%s)", self.name, op, reason.value)
        return REJECTED

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def start(self) -> float:
        """Begin a new interval and return its start timepoint.

        Returns ``REJECTED`` if an interval is already running.
        """
        tp = self._observe()
        if self.interval_start is not None:
            return self._reject(Rejection.ALREADY_RUNNING, "start")

        self.interval_start = tp
        self.last_rejection = None
        return tp

    def stop(self) -> float:
        """End the running interval and return the cumulative elapsed total."""
        tp = self._observe()
        if self.interval_start is None:
            return self._reject(Rejection.NOT_RUNNING, "stop")

        interval = self._close_interval(tp)
        self.interval_start = None
        self.last_rejection = None
        logger.debug("stopwatch %s: stopped after %.6fs (total %.6fs)", self.name, interval, self._elapsed)
        return self._elapsed

    def lap(self) -> float:
        """Record a lap and keep running.

        Unlike :meth:`stop`, the return value is the duration of the interval
        that just ended, not the cumulative total.
        """
        tp = self._observe()
        if self.interval_start is None:
            return self._reject(Rejection.NOT_RUNNING, "lap")

        interval = self._close_interval(tp)
        self.interval_start = tp
        self.last_rejection = None
        logger.debug("stopwatch %s: lap %d took %.6fs", self.name, len(self._laps), interval)
        return interval

    def _close_interval(self, tp: float) -> float:
        assert self.interval_start is not None
        interval = tp - self.interval_start
        self._elapsed += interval
        self._laps.append(interval)
        return interval

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_lap(self, index: int) -> float:
        if 0 <= index < len(self._laps):
            return self._laps[index]
        return REJECTED

    def get_lap_count(self) -> int:
        return len(self._laps)

    @property
    def running(self) -> bool:
        return self.interval_start is not None

    @property
    def elapsed(self) -> float:
        """Sum of all completed intervals; the running one is not included."""
        return self._elapsed

    @property
    def laps(self) -> tuple[float, ...]:
        return tuple(self._laps)

    def snapshot(self) -> StopwatchSnapshot:
        return StopwatchSnapshot(
            name=self.name,
            running=self.running,
            interval_start=self.interval_start,
            elapsed=self._elapsed,
            laps=list(self._laps),
            last_timepoint=self.last_timepoint,
        )


__all__ = ["REJECTED", "Rejection", "Stopwatch", "new_stopwatch_name"]
