"""Progress report output: text summary and machine-readable JSON."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from hairsnap.models.progress import ProgressRecord, ProgressTrend

logger = logging.getLogger(__name__)

_TREND_LABELS = {
    ProgressTrend.IMPROVING: "Improving",
    ProgressTrend.STABLE: "Stable",
    ProgressTrend.DECLINING: "Declining",
    ProgressTrend.INSUFFICIENT_DATA: "Not enough data",
}


def trend_label(trend: ProgressTrend) -> str:
    return _TREND_LABELS.get(trend, str(trend))


def format_percent_change(percent_change: float | None) -> str:
    if percent_change is None:
        return "n/a"
    return f"{percent_change:+.2f}%"


def format_progress_summary(record: ProgressRecord, suggestions: list[str]) -> str:
    """Generate a human-readable progress summary."""
    lines = [
        f"Trend: {trend_label(record.trend)}",
        f"  Change: {format_percent_change(record.percent_change)}",
        f"  Snapshots: {len(record.historical_series)}",
    ]
    if record.historical_series:
        first = record.historical_series[0]
        last = record.historical_series[-1]
        lines.append(f"  Period: {first.date} to {last.date}")
    if suggestions:
        lines.append("Suggestions:")
        for i, s in enumerate(suggestions, 1):
            lines.append(f"  {i}. {s}")
    return "\n".join(lines)


def generate_json_report(
    record: ProgressRecord,
    suggestions: list[str],
    output_path: Path,
) -> None:
    """Write a machine-readable JSON report."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    report = record.model_dump(mode="json")
    report["suggestions"] = list(suggestions)

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    logger.info("JSON report: %s", output_path)


def default_report_path(output_dir: Path, now: datetime | None = None) -> Path:
    """Timestamped report file inside the configured report directory."""
    now = now or datetime.now()
    return Path(output_dir) / f"progress_{now:%Y%m%d_%H%M%S}.json"
