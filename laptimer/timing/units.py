"""Integer duration units with truncating conversion."""

from __future__ import annotations

from enum import Enum
from typing import Union

_ALIASES = {
    "ns": "NANOSECONDS",
    "us": "MICROSECONDS",
    "ms": "MILLISECONDS",
    "s": "SECONDS",
    "sec": "SECONDS",
    "min": "MINUTES",
    "h": "HOURS",
    "d": "DAYS",
}


class TimeUnit(Enum):
    """Duration units, valued by their length in nanoseconds."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 60 * 60 * 1_000_000_000
    DAYS = 24 * 60 * 60 * 1_000_000_000

    def convert(self, duration: int, source: "TimeUnit") -> int:
        """Convert ``duration`` expressed in ``source`` into this unit.

        Conversions to a coarser unit truncate toward zero.
        """

        duration = int(duration)
        if source.value >= self.value:
            return duration * (source.value // self.value)
        ratio = self.value // source.value
        whole = abs(duration) // ratio
        return whole if duration >= 0 else -whole

    @classmethod
    def parse(cls, name: Union[str, "TimeUnit"]) -> "TimeUnit":
        if isinstance(name, TimeUnit):
            return name
        if not isinstance(name, str):
            raise ValueError(f"Unknown time unit: {name!r}")
        key = name.strip()
        key = _ALIASES.get(key.lower(), key.upper())
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown time unit: {name!r}") from None


MILLISECONDS = TimeUnit.MILLISECONDS


__all__ = ["TimeUnit", "MILLISECONDS"]
