"""Export timer reports and lap tables."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import yaml

from ..report.schemas import TimerReport


def ensure_dir(path: Path) -> Path:
    """Ensure that a directory exists."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def write_report_yaml(report: TimerReport, path: Path) -> Path:
    path = Path(path)
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(report.model_dump(), fh, sort_keys=False)
    return path


def write_laps_parquet(frame: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    ensure_dir(path.parent)
    frame.to_parquet(path, index=False)
    return path


__all__ = ["ensure_dir", "write_report_yaml", "write_laps_parquet"]
