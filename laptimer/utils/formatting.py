"""Human readable durations."""

from __future__ import annotations


def format_millis(millis: int) -> str:
    """Render a millisecond count as ``DD:HH:MM:SS.mmm``.

    Days are not wrapped, so very long durations widen the first field.
    """

    millis = int(millis)
    if millis < 0:
        raise ValueError(f"Cannot format a negative duration: {millis}")
    seconds, ms = divmod(millis, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    return f"{days:02d}:{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"


__all__ = ["format_millis"]
