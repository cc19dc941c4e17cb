"""Structured configuration for timer-driven tooling."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from omegaconf import DictConfig, OmegaConf

from .timing.clock import resolve_clock
from .timing.lap_timer import LapTimer
from .timing.units import TimeUnit


@dataclass
class TimerConfig:
    clock: str = "wall"
    unit: str = "milliseconds"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    output_dir: Optional[str] = None

    def build_timer(self) -> LapTimer:
        return LapTimer(clock=resolve_clock(self.clock))

    @property
    def time_unit(self) -> TimeUnit:
        return TimeUnit.parse(self.unit)


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[List[str]] = None,
) -> TimerConfig:
    """Merge a YAML file and ``key=value`` overrides onto :class:`TimerConfig`."""

    cfg = OmegaConf.structured(TimerConfig)
    if path is not None:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(Path(path)))
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    return from_dictconfig(cfg)


def from_dictconfig(cfg: Union[DictConfig, Any]) -> TimerConfig:
    cfg = OmegaConf.merge(OmegaConf.structured(TimerConfig), cfg)
    config: TimerConfig = OmegaConf.to_object(cfg)
    resolve_clock(config.clock)
    TimeUnit.parse(config.unit)
    return config


__all__ = ["TimerConfig", "load_config", "from_dictconfig"]
