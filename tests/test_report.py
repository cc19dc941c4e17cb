from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

pytest.importorskip("pandas")

from laptimer import LapTimer, ManualClock, NotStoppedError, TimeUnit
from laptimer.report.summary import LAP_COLUMNS, build_report, laps_frame
from laptimer.utils.fileio import write_report_yaml


def make_stopped_timer():
    clock = ManualClock(start=10_000)
    timer = LapTimer(clock=clock)
    for millis in (1_000, 2_500):
        with timer.lap("load"):
            clock.advance(millis)
    with timer.lap("save"):
        clock.advance(400)
    return timer


def test_build_report_seconds():
    report = build_report(make_stopped_timer(), "seconds", include_laps=True)
    assert report.state == "stopped"
    assert report.unit == "seconds"
    load, save = report.tags
    assert (load.tag, load.lap_count, load.total, load.average_per_lap, load.last_lap) == ("load", 2, 3, 1, 2)
    assert load.total_formatted == "00:00:00:03.500"
    assert [lap.duration_ms for lap in load.laps] == [1_000, 2_500]
    assert save.total == 0 and save.laps[0].lap_index == 1


def test_build_report_requires_stopped_timer():
    timer = make_stopped_timer()
    timer.start("load")
    with pytest.raises(NotStoppedError):
        build_report(timer, TimeUnit.MILLISECONDS)


def test_laps_frame():
    frame = laps_frame(make_stopped_timer())
    assert list(frame.columns) == LAP_COLUMNS
    assert frame["tag"].tolist() == ["load", "load", "save"]
    assert frame.groupby("tag")["duration_ms"].sum().to_dict() == {"load": 3_500, "save": 400}


def test_laps_frame_empty():
    frame = laps_frame(LapTimer(clock=ManualClock()))
    assert frame.empty
    assert list(frame.columns) == LAP_COLUMNS


def test_write_report_yaml(tmp_path):
    yaml = pytest.importorskip("yaml")
    path = write_report_yaml(build_report(make_stopped_timer()), tmp_path / "out" / "report.yaml")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data["unit"] == "milliseconds"
    assert data["tags"][0]["total"] == 3_500
