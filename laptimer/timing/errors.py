"""Errors raised when the lap timer is driven out of order."""

from __future__ import annotations


class LapTimerError(RuntimeError):
    """Base class for lap timer misuse."""


class AlreadyRunningError(LapTimerError):
    pass


class NotRunningError(LapTimerError):
    pass


class NotStartedError(LapTimerError):
    pass


class NotStoppedError(LapTimerError):
    pass


class NoActiveLapError(LapTimerError):
    """``stop`` was called for a tag without a lap in flight."""


class UnknownTagError(LapTimerError, KeyError):
    """The tag has no recorded history."""

    def __init__(self, tag: str):
        super().__init__(f"Unknown tag: {tag!r}")
        self.tag = tag

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "LapTimerError",
    "AlreadyRunningError",
    "NotRunningError",
    "NotStartedError",
    "NotStoppedError",
    "NoActiveLapError",
    "UnknownTagError",
]
