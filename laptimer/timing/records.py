"""Per-tag lap bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional


@dataclass(frozen=True)
class LapRecord:
    """One start/stop cycle. ``stop_time`` stays 0 until the lap is stopped."""

    start_time: int
    lap_index: int
    stop_time: int = 0

    @property
    def duration(self) -> int:
        return self.stop_time - self.start_time

    def stopped(self, at: int) -> "LapRecord":
        return replace(self, stop_time=at)


@dataclass
class TagHistory:
    """Aggregated laps for a single tag."""

    current_lap: Optional[LapRecord] = None
    completed_laps: List[LapRecord] = field(default_factory=list)
    total_duration: int = 0

    @property
    def lap_count(self) -> int:
        return len(self.completed_laps)

    @property
    def next_lap_index(self) -> int:
        return 1 if self.current_lap is None else self.current_lap.lap_index + 1

    def complete(self, lap: LapRecord) -> None:
        self.current_lap = lap
        self.completed_laps.append(lap)
        self.total_duration += lap.duration

    def copy(self) -> "TagHistory":
        return TagHistory(self.current_lap, list(self.completed_laps), self.total_duration)


__all__ = ["LapRecord", "TagHistory"]
