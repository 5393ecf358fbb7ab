"""Tests for the progress tracker."""

import pytest

from hairsnap.analysis.estimator import DensityEstimate, RandomDensityEstimator
from hairsnap.models.config import TrackerConfig
from hairsnap.models.progress import ProgressTrend
from hairsnap.store.base import InMemorySnapshotStore
from hairsnap.store.json_store import JsonSnapshotStore
from hairsnap.tracker import ProgressTracker

DAY_MS = 86_400_000
BASE_TS = 1_704_067_200_000


class SequenceEstimator:
    """Returns preset overall scores in order."""

    def __init__(self, scores: list[float]):
        self.scores = list(scores)

    def estimate(self, image_uri: str) -> DensityEstimate:
        return DensityEstimate(overall=self.scores.pop(0))


class TestCapture:
    def test_capture_saves_unscored(self):
        tracker = ProgressTracker(InMemorySnapshotStore(), SequenceEstimator([]))
        snapshot = tracker.capture("file:///a.jpg", timestamp=BASE_TS, notes="front")
        assert tracker.store.get(snapshot.id) == snapshot
        assert snapshot.is_scored is False
        assert snapshot.notes == "front"

    def test_capture_defaults_timestamp_to_now(self):
        tracker = ProgressTracker(InMemorySnapshotStore(), SequenceEstimator([]))
        snapshot = tracker.capture("file:///a.jpg")
        assert snapshot.timestamp > BASE_TS


class TestReview:
    """Tests for scoring stored snapshots."""

    def test_review_scores_and_saves(self):
        tracker = ProgressTracker(InMemorySnapshotStore(), SequenceEstimator([77]))
        snapshot = tracker.capture("a.jpg", timestamp=BASE_TS)
        scored = tracker.review(snapshot.id)
        assert scored.density_score == 77
        assert tracker.store.get(snapshot.id).density_score == 77

    def test_review_unknown_id(self):
        tracker = ProgressTracker(InMemorySnapshotStore(), SequenceEstimator([]))
        with pytest.raises(KeyError):
            tracker.review("missing")

    def test_review_pending_only_touches_unscored(self, memory_store, unscored_snapshot):
        memory_store.save(unscored_snapshot)
        tracker = ProgressTracker(memory_store, SequenceEstimator([50]))
        scored = tracker.review_pending()
        assert [s.id for s in scored] == ["u1"]
        assert memory_store.get("s1").density_score == 80


class TestProgress:
    """Tests for ProgressTracker.progress()."""

    def test_declining_history(self, memory_store):
        tracker = ProgressTracker(memory_store, SequenceEstimator([]))
        record, suggestions = tracker.progress()
        assert record.trend == ProgressTrend.DECLINING
        assert record.percent_change == -12.5
        assert len(suggestions) == 4

    def test_new_user_has_insufficient_data(self):
        tracker = ProgressTracker(InMemorySnapshotStore(), SequenceEstimator([]))
        record, suggestions = tracker.progress()
        assert record.trend == ProgressTrend.INSUFFICIENT_DATA
        assert len(suggestions) == 3

    def test_exclude_policy_from_config(self, memory_store, unscored_snapshot):
        memory_store.save(unscored_snapshot)
        zero = ProgressTracker(memory_store, SequenceEstimator([]))
        exclude = ProgressTracker(
            memory_store, SequenceEstimator([]),
            TrackerConfig(missing_score_policy="exclude"),
        )
        assert zero.progress()[0].percent_change == -100.0
        assert exclude.progress()[0].percent_change == -12.5

    def test_threshold_from_config(self, memory_store):
        tracker = ProgressTracker(
            memory_store, SequenceEstimator([]), TrackerConfig(stable_threshold=20.0),
        )
        assert tracker.progress()[0].trend == ProgressTrend.STABLE

    def test_remove(self, memory_store):
        tracker = ProgressTracker(memory_store, SequenceEstimator([]))
        assert tracker.remove("s1") is True
        assert tracker.remove("s1") is False


class TestFromConfig:
    def test_builds_json_store_and_estimator(self, tracker_config):
        tracker = ProgressTracker.from_config(tracker_config)
        assert isinstance(tracker.store, JsonSnapshotStore)
        assert isinstance(tracker.estimator, RandomDensityEstimator)
        assert str(tracker.store.path) == tracker_config.store_path

    def test_full_cycle_persists(self, tracker_config):
        tracker = ProgressTracker.from_config(tracker_config)
        for i in range(3):
            tracker.capture(f"photo{i}.jpg", timestamp=BASE_TS + i * DAY_MS)
        assert len(tracker.review_pending()) == 3

        reopened = ProgressTracker.from_config(tracker_config)
        record, _ = reopened.progress()
        assert len(record.historical_series) == 3
        assert all(60 <= p.score <= 100 for p in record.historical_series)
        assert record.trend != ProgressTrend.INSUFFICIENT_DATA
