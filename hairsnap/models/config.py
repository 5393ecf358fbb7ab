"""Configuration models for the progress tracker."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def _check_time(v: Optional[str]) -> Optional[str]:
    if v is None or v == "":
        return None
    if not _TIME_RE.match(v):
        raise ValueError(f"Invalid time '{v}', expected HH:MM")
    return v


class ReminderSettings(BaseModel):
    frequency: str = "daily"  # daily, twice-daily
    morning_time: Optional[str] = "09:00"
    evening_time: Optional[str] = "21:00"
    username: Optional[str] = None
    notifications_enabled: bool = True

    @field_validator("frequency")
    @classmethod
    def check_frequency(cls, v: str) -> str:
        if v not in ("daily", "twice-daily"):
            raise ValueError(f"Unknown reminder frequency '{v}'")
        return v

    @field_validator("morning_time", "evening_time")
    @classmethod
    def check_times(cls, v: Optional[str]) -> Optional[str]:
        return _check_time(v)


class TrackerConfig(BaseModel):
    # Storage
    store_path: str = "./.hairsnap/snapshots.json"

    # Analysis
    missing_score_policy: str = "zero"  # zero, exclude
    stable_threshold: float = Field(default=5.0, gt=0)

    # Density estimator stand-in
    estimator_low: int = 60
    estimator_high: int = 100
    estimator_seed: Optional[int] = None

    # Reminders
    reminders: ReminderSettings = Field(default_factory=ReminderSettings)

    # Reporting
    report_output_dir: str = "./hairsnap-reports"

    @field_validator("missing_score_policy")
    @classmethod
    def check_policy(cls, v: str) -> str:
        v = v.lower()
        if v not in ("zero", "exclude"):
            raise ValueError(f"Unknown missing score policy '{v}'")
        return v

    @model_validator(mode="after")
    def check_estimator_bounds(self) -> "TrackerConfig":
        if not 0 <= self.estimator_low <= self.estimator_high <= 100:
            raise ValueError("Estimator bounds must satisfy 0 <= low <= high <= 100")
        return self

    @classmethod
    def load(cls, path: str | Path) -> "TrackerConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
