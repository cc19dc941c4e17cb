"""Build reports and lap tables from a stopped timer."""

from __future__ import annotations

from typing import Dict, List, Union

import pandas as pd

from ..timing.lap_timer import LapTimer
from ..timing.units import MILLISECONDS, TimeUnit
from ..utils.formatting import format_millis
from .schemas import LapModel, TagSummary, TimerReport

LAP_COLUMNS = ["tag", "lap_index", "start_time", "stop_time", "duration_ms"]


def summarize_tag(timer: LapTimer, tag: str, unit: TimeUnit = MILLISECONDS, include_laps: bool = False) -> TagSummary:
    """Collect the statistics of one tag. The timer must be stopped."""

    laps: List[LapModel] = []
    if include_laps:
        laps = [
            LapModel(lap_index=lap.lap_index, start_time=lap.start_time, stop_time=lap.stop_time, duration_ms=lap.duration)
            for lap in timer.history(tag).completed_laps
        ]
    return TagSummary(
        tag=tag,
        unit=unit.name.lower(),
        lap_count=timer.lap_count(tag),
        total=timer.total_duration(tag, unit),
        average_per_lap=timer.average_duration_per_lap(tag, unit),
        last_lap=timer.last_lap_duration(tag, unit),
        total_formatted=format_millis(timer.total_duration(tag)),
        laps=laps,
    )


def build_report(timer: LapTimer, unit: Union[str, TimeUnit] = MILLISECONDS, include_laps: bool = False) -> TimerReport:
    unit = TimeUnit.parse(unit)
    summaries = [summarize_tag(timer, tag, unit, include_laps) for tag in timer.tags()]
    return TimerReport(state=timer.state.value, unit=unit.name.lower(), tags=summaries)


def laps_frame(timer: LapTimer) -> pd.DataFrame:
    """One row per completed lap, grouped by tag in first-start order."""

    rows: List[Dict[str, object]] = []
    for tag in timer.tags():
        for lap in timer.history(tag).completed_laps:
            rows.append(
                {
                    "tag": tag,
                    "lap_index": lap.lap_index,
                    "start_time": lap.start_time,
                    "stop_time": lap.stop_time,
                    "duration_ms": lap.duration,
                }
            )
    return pd.DataFrame(rows, columns=LAP_COLUMNS)


__all__ = ["summarize_tag", "build_report", "laps_frame", "LAP_COLUMNS"]
