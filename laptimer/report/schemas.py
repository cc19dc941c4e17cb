"""Pydantic models for timer reports."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class LapModel(BaseModel):
    lap_index: int
    start_time: int
    stop_time: int
    duration_ms: int


class TagSummary(BaseModel):
    tag: str
    unit: str
    lap_count: int
    total: int
    average_per_lap: int
    last_lap: int
    total_formatted: str
    laps: List[LapModel] = Field(default_factory=list)


class TimerReport(BaseModel):
    state: str
    unit: str
    tags: List[TagSummary] = Field(default_factory=list)


__all__ = ["LapModel", "TagSummary", "TimerReport"]
