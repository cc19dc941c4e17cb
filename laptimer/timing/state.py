"""Timer lifecycle states."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class TimerState(Enum):
    UNSTARTED = "unstarted"
    RUNNING = "running"
    STOPPED = "stopped"


_FLAGS = {
    TimerState.UNSTARTED: (False, True),
    TimerState.RUNNING: (True, False),
    TimerState.STOPPED: (False, True),
}


def state_flags(state: TimerState) -> Tuple[bool, bool]:
    """Return the ``(started, stopped)`` pair for ``state``.

    An unstarted timer has no active run, so it counts as stopped.
    """

    return _FLAGS[state]


__all__ = ["TimerState", "state_flags"]
