"""Progression analysis: turns a snapshot history into a trend classification."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from hairsnap.models.progress import HistoricalScore, ProgressRecord, ProgressTrend
from hairsnap.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

STABLE_THRESHOLD = 5.0


class MissingScorePolicy(str, Enum):
    """How snapshots without a density score take part in the calculation."""
    ZERO = "zero"  # score as 0
    EXCLUDE = "exclude"  # drop before analysis


def _score(snapshot: Snapshot) -> float:
    return snapshot.density_score if snapshot.density_score is not None else 0


def _to_series(snapshots: list[Snapshot]) -> list[HistoricalScore]:
    return [HistoricalScore(date=s.captured_date, score=_score(s)) for s in snapshots]


def classify_trend(percent_change: float, stable_threshold: float = STABLE_THRESHOLD) -> ProgressTrend:
    """Classify a percent change. The stable band is exclusive of its edges."""
    if abs(percent_change) < stable_threshold:
        return ProgressTrend.STABLE
    if percent_change > 0:
        return ProgressTrend.IMPROVING
    return ProgressTrend.DECLINING


def percent_change_between(first: float, latest: float) -> float:
    """Signed percent change from first to latest, rounded to 2 places.

    A first score of 0 yields 0 rather than dividing by zero.
    """
    if first == 0:
        return 0.0
    return round((latest - first) / first * 100, 2)


def compute_progress(
    snapshots: Iterable[Snapshot],
    missing_score: MissingScorePolicy = MissingScorePolicy.ZERO,
    stable_threshold: float = STABLE_THRESHOLD,
) -> ProgressRecord:
    """Compute the progress record for a collection of snapshots.

    The input may be in any order and is never modified. With fewer than two
    usable snapshots the trend is ``insufficient_data`` and the series keeps
    the input order.
    """
    items = list(snapshots)
    if MissingScorePolicy(missing_score) is MissingScorePolicy.EXCLUDE:
        kept = [s for s in items if s.is_scored]
        if len(kept) != len(items):
            logger.debug("Excluding %d unscored snapshots", len(items) - len(kept))
        items = kept

    if len(items) < 2:
        return ProgressRecord(
            trend=ProgressTrend.INSUFFICIENT_DATA,
            historical_series=_to_series(items),
        )

    ordered = sorted(items, key=lambda s: s.timestamp)
    change = percent_change_between(_score(ordered[0]), _score(ordered[-1]))
    trend = classify_trend(change, stable_threshold)

    logger.debug(
        "Progress over %d snapshots: %s (%.2f%%)", len(ordered), trend.value, change,
    )
    return ProgressRecord(
        trend=trend,
        percent_change=change,
        historical_series=_to_series(ordered),
    )
