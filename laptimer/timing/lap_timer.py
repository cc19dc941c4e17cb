"""Tag-keyed lap timer."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from ..utils.formatting import format_millis
from ..utils.logging import logger
from .clock import Clock, wall_clock_ms
from .errors import (
    AlreadyRunningError,
    NoActiveLapError,
    NotRunningError,
    NotStartedError,
    NotStoppedError,
    UnknownTagError,
)
from .records import LapRecord, TagHistory
from .state import TimerState, state_flags
from .units import MILLISECONDS, TimeUnit


class LapTimer:
    """Measure repeated start/stop cycles for named tags.

    Every tag keeps its own lap history, but the lifecycle state is shared by
    the whole timer: only one lap may be in flight at a time, whatever its tag.
    Durations are queried once the timer is stopped.

    Args:
        clock: Zero-argument callable returning the current time in
            milliseconds. Defaults to the wall clock.
    """

    def __init__(self, clock: Clock = wall_clock_ms):
        self.clock = clock
        self._laps: Dict[str, TagHistory] = {}
        self._state = TimerState.UNSTARTED
        self._active: Optional[str] = None
        self._lock = threading.RLock()

    @property
    def state(self) -> TimerState:
        return self._state

    def is_started(self) -> bool:
        return state_flags(self._state)[0]

    def is_stopped(self) -> bool:
        return state_flags(self._state)[1]

    def start(self, tag: str) -> int:
        """Open a new lap for ``tag`` and return its start instant."""

        with self._lock:
            if self._state is TimerState.RUNNING:
                raise AlreadyRunningError(f"Timer already started; cannot start {tag!r}")
            now = self.clock()
            history = self._laps.setdefault(tag, TagHistory())
            history.current_lap = LapRecord(start_time=now, lap_index=history.next_lap_index)
            self._state = TimerState.RUNNING
            self._active = tag
            logger.debug("start tag={} lap={} at={}", tag, history.current_lap.lap_index, now)
            return now

    def stop(self, tag: str) -> int:
        """Close the lap in flight for ``tag`` and return its stop instant."""

        with self._lock:
            if self._state is not TimerState.RUNNING:
                raise NotRunningError(f"Timer is not running; cannot stop {tag!r}")
            if tag != self._active:
                raise NoActiveLapError(f"No lap in flight for tag {tag!r}")
            history = self._laps.get(tag)
            if history is None:
                # The lap in flight was reset: close it without recording.
                now = self.clock()
                self._state = TimerState.STOPPED
                self._active = None
                logger.debug("stop tag={} at={} discarded", tag, now)
                return now
            now = self.clock()
            lap = history.current_lap.stopped(now)
            history.complete(lap)
            self._state = TimerState.STOPPED
            self._active = None
            logger.debug("stop tag={} lap={} at={} duration_ms={}", tag, lap.lap_index, now, lap.duration)
            return now

    def reset(self, tag: str) -> None:
        """Discard every lap recorded for ``tag``."""

        with self._lock:
            if self._state is not TimerState.RUNNING:
                raise NotRunningError(f"Timer is not running; cannot reset {tag!r}")
            if self._laps.pop(tag, None) is not None:
                logger.debug("reset tag={}", tag)

    @contextmanager
    def lap(self, tag: str) -> Iterator["LapTimer"]:
        self.start(tag)
        try:
            yield self
        except BaseException:
            if self._active == tag:
                self.stop(tag)
            raise
        self.stop(tag)

    def lap_count(self, tag: str) -> int:
        with self._lock:
            if self._state is TimerState.UNSTARTED:
                raise NotStartedError("Timer not started")
            return self._history(tag).lap_count

    def last_lap_duration(self, tag: str, unit: TimeUnit = MILLISECONDS) -> int:
        with self._lock:
            self._require_stopped()
            history = self._laps.get(tag)
            millis = history.completed_laps[-1].duration if history and history.completed_laps else 0
            return unit.convert(millis, MILLISECONDS)

    def total_duration(self, tag: str, unit: TimeUnit = MILLISECONDS) -> int:
        with self._lock:
            self._require_stopped()
            history = self._laps.get(tag)
            return unit.convert(history.total_duration if history else 0, MILLISECONDS)

    def average_duration_per_lap(self, tag: str, unit: TimeUnit = MILLISECONDS) -> int:
        with self._lock:
            self._require_stopped()
            return unit.convert(self._average_millis(tag), MILLISECONDS)

    def average_duration(self, tag: str, unit: TimeUnit = MILLISECONDS) -> int:
        """Average per lap multiplied back by the lap count."""

        with self._lock:
            self._require_stopped()
            if tag not in self._laps:
                return 0
            return unit.convert(self._average_millis(tag) * self.lap_count(tag), MILLISECONDS)

    def tags(self) -> List[str]:
        with self._lock:
            return list(self._laps)

    def history(self, tag: str) -> TagHistory:
        """Return a detached copy of the history recorded for ``tag``."""

        with self._lock:
            return self._history(tag).copy()

    @staticmethod
    def format_millis(millis: int) -> str:
        return format_millis(millis)

    def _history(self, tag: str) -> TagHistory:
        try:
            return self._laps[tag]
        except KeyError:
            raise UnknownTagError(tag) from None

    def _average_millis(self, tag: str) -> int:
        history = self._laps.get(tag)
        if history is None or not history.completed_laps:
            return 0
        return history.total_duration // history.lap_count

    def _require_stopped(self) -> None:
        if self._state is not TimerState.STOPPED:
            raise NotStoppedError(f"Timer is not stopped (state={self._state.value})")

    def __repr__(self) -> str:
        return f"LapTimer(state={self._state.value}, tags={len(self._laps)})"


__all__ = ["LapTimer"]
