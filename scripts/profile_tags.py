"""Time a sleep workload under a few tags and export the report."""

from __future__ import annotations

import time
from pathlib import Path

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig

from laptimer.config import from_dictconfig
from laptimer.report.summary import build_report, laps_frame
from laptimer.utils.fileio import write_laps_parquet, write_report_yaml
from laptimer.utils.logging import logger, setup_logging


@hydra.main(config_path="../configs", config_name="profile", version_base=None)
def main(cfg: DictConfig) -> None:
    config = from_dictconfig(cfg.timer)
    setup_logging(config.log_file, level=config.log_level)
    timer = config.build_timer()

    for _ in range(cfg.workload.laps):
        for tag in cfg.workload.tags:
            with timer.lap(tag):
                time.sleep(cfg.workload.sleep_ms / 1000.0)

    report = build_report(timer, config.time_unit)
    for summary in report.tags:
        logger.info(
            "tag={tag} laps={laps} total={total} avg={avg} ({unit})",
            tag=summary.tag,
            laps=summary.lap_count,
            total=summary.total_formatted,
            avg=summary.average_per_lap,
            unit=summary.unit,
        )

    if config.output_dir:
        out = Path(to_absolute_path(config.output_dir))
        write_report_yaml(report, out / "report.yaml")
        write_laps_parquet(laps_frame(timer), out / "laps.parquet")
        logger.info("Wrote report to {}", out)


if __name__ == "__main__":
    main()
