"""Progress analysis output structures."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProgressTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficient_data"


class HistoricalScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str  # YYYY-MM-DD
    score: float


class ProgressRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    trend: ProgressTrend
    percent_change: Optional[float] = None  # absent for insufficient_data
    historical_series: list[HistoricalScore] = Field(default_factory=list)
