"""Progress tracker: ties together snapshot storage, density scoring, and analysis."""

from __future__ import annotations

import logging
from pathlib import Path

from hairsnap.analysis.estimator import DensityEstimator, RandomDensityEstimator, score_snapshot
from hairsnap.analysis.progression import MissingScorePolicy, compute_progress
from hairsnap.analysis.suggestions import generate_suggestions
from hairsnap.models.config import TrackerConfig
from hairsnap.models.progress import ProgressRecord
from hairsnap.models.snapshot import Snapshot, now_ms
from hairsnap.store.base import SnapshotStore
from hairsnap.store.json_store import JsonSnapshotStore

logger = logging.getLogger(__name__)


class ProgressTracker:
    """Captures, scores, and analyses snapshots through an injected store and estimator."""

    def __init__(
        self,
        store: SnapshotStore,
        estimator: DensityEstimator,
        config: TrackerConfig | None = None,
    ):
        self.store = store
        self.estimator = estimator
        self.config = config or TrackerConfig()

    @classmethod
    def from_config(cls, config: TrackerConfig) -> "ProgressTracker":
        """Build a tracker backed by the JSON store and random estimator from config."""
        store = JsonSnapshotStore(Path(config.store_path))
        estimator = RandomDensityEstimator(
            low=config.estimator_low,
            high=config.estimator_high,
            seed=config.estimator_seed,
        )
        return cls(store, estimator, config)

    def capture(
        self, image_uri: str, timestamp: int | None = None, notes: str | None = None,
    ) -> Snapshot:
        """Record a new, unscored snapshot."""
        snapshot = Snapshot(
            image_uri=image_uri,
            timestamp=timestamp if timestamp is not None else now_ms(),
            notes=notes,
        )
        self.store.save(snapshot)
        logger.info("Captured snapshot %s (%s)", snapshot.id, snapshot.captured_date)
        return snapshot

    def review(self, snapshot_id: str) -> Snapshot:
        """Score a stored snapshot with the estimator and save the result."""
        snapshot = self.store.get(snapshot_id)
        if snapshot is None:
            raise KeyError(f"Snapshot not found: {snapshot_id}")
        scored = score_snapshot(snapshot, self.estimator)
        self.store.save(scored)
        logger.info("Scored snapshot %s: %.0f", scored.id, scored.density_score)
        return scored

    def review_pending(self) -> list[Snapshot]:
        """Score every snapshot that has no density score yet."""
        pending = [s for s in self.store.list() if not s.is_scored]
        logger.debug("%d snapshots awaiting review", len(pending))
        return [self.review(s.id) for s in pending]

    def remove(self, snapshot_id: str) -> bool:
        return self.store.delete(snapshot_id)

    def progress(self) -> tuple[ProgressRecord, list[str]]:
        """Analyse the full stored history and pick matching suggestions."""
        record = compute_progress(
            self.store.list(),
            missing_score=MissingScorePolicy(self.config.missing_score_policy),
            stable_threshold=self.config.stable_threshold,
        )
        return record, generate_suggestions(record)
