"""Tag-keyed lap timer for in-process instrumentation."""

from importlib.metadata import version

from .timing.clock import ManualClock, monotonic_clock_ms, wall_clock_ms
from .timing.errors import (
    AlreadyRunningError,
    LapTimerError,
    NoActiveLapError,
    NotRunningError,
    NotStartedError,
    NotStoppedError,
    UnknownTagError,
)
from .timing.lap_timer import LapTimer
from .timing.records import LapRecord, TagHistory
from .timing.state import TimerState, state_flags
from .timing.units import TimeUnit
from .utils.formatting import format_millis

__all__ = [
    "__version__",
    "LapTimer",
    "LapRecord",
    "TagHistory",
    "TimerState",
    "state_flags",
    "TimeUnit",
    "ManualClock",
    "wall_clock_ms",
    "monotonic_clock_ms",
    "format_millis",
    "LapTimerError",
    "AlreadyRunningError",
    "NotRunningError",
    "NotStartedError",
    "NotStoppedError",
    "NoActiveLapError",
    "UnknownTagError",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return version("lap-timer")
        except Exception:  # pragma: no cover - fallback when pkg metadata missing
            return "0.1.0"
    raise AttributeError(name)
