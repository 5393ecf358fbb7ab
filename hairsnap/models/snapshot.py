"""Snapshot data structures: one record per captured photo."""

from __future__ import annotations

import math
import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# 9999-12-31T23:59:59.999Z, the last instant datetime can represent
MAX_TIMESTAMP_MS = 253_402_300_799_999


class SubScores(BaseModel):
    """Per-region density breakdown, same 0-100 scale as the overall score."""
    model_config = ConfigDict(frozen=True)

    crown: Optional[float] = Field(default=None, ge=0, le=100)
    hairline: Optional[float] = Field(default=None, ge=0, le=100)
    overall: Optional[float] = Field(default=None, ge=0, le=100)


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    image_uri: str
    timestamp: int  # milliseconds since epoch
    density_score: Optional[float] = Field(default=None, ge=0, le=100)
    sub_scores: Optional[SubScores] = None
    notes: Optional[str] = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def check_timestamp(cls, v):
        if isinstance(v, bool):
            raise ValueError("timestamp must be a number, not a boolean")
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("timestamp must be finite")
        return v

    @field_validator("timestamp")
    @classmethod
    def check_range(cls, v: int) -> int:
        if v < 0:
            raise ValueError("timestamp must not be negative")
        if v > MAX_TIMESTAMP_MS:
            raise ValueError("timestamp is past the year 9999")
        return v

    @field_validator("density_score", mode="before")
    @classmethod
    def check_score_finite(cls, v):
        if isinstance(v, float) and math.isnan(v):
            raise ValueError("density_score must not be NaN")
        return v

    @property
    def captured_at(self) -> datetime:
        return timestamp_to_datetime(self.timestamp)

    @property
    def captured_date(self) -> str:
        """UTC calendar date of the capture, as YYYY-MM-DD."""
        return timestamp_to_date(self.timestamp)

    @property
    def is_scored(self) -> bool:
        return self.density_score is not None


def timestamp_to_datetime(timestamp_ms: int) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def timestamp_to_date(timestamp_ms: int) -> str:
    return timestamp_to_datetime(timestamp_ms).strftime("%Y-%m-%d")


def now_ms() -> int:
    return int(datetime.now(tz=timezone.utc).timestamp() * 1000)


class SnapshotCollection(BaseModel):
    """On-disk document holding every stored snapshot, keyed by id."""
    last_updated: str = ""
    snapshots: dict[str, Snapshot] = Field(default_factory=dict)
