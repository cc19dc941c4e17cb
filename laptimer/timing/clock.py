"""Millisecond time sources for the lap timer."""

from __future__ import annotations

import time
from typing import Callable, Dict

NS_PER_MS = 1_000_000

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    """Milliseconds since the Unix epoch."""

    return time.time_ns() // NS_PER_MS


def monotonic_clock_ms() -> int:
    return time.monotonic_ns() // NS_PER_MS


class ManualClock:
    """Clock that only moves when told to; handy for deterministic tests."""

    def __init__(self, start: int = 1_000, step: int = 0):
        self.now = int(start)
        self.step = int(step)

    def advance(self, millis: int) -> int:
        self.now += int(millis)
        return self.now

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


CLOCKS: Dict[str, Clock] = {
    "wall": wall_clock_ms,
    "monotonic": monotonic_clock_ms,
}


def resolve_clock(name: str) -> Clock:
    try:
        return CLOCKS[name]
    except KeyError:
        raise ValueError(f"Unknown clock {name!r}; expected one of {sorted(CLOCKS)}") from None


__all__ = ["Clock", "ManualClock", "CLOCKS", "resolve_clock", "wall_clock_ms", "monotonic_clock_ms"]
