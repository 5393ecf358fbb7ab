"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from hairsnap.analysis.estimator import RandomDensityEstimator
from hairsnap.models.config import ReminderSettings, TrackerConfig
from hairsnap.models.snapshot import Snapshot
from hairsnap.store.base import InMemorySnapshotStore
from hairsnap.store.json_store import JsonSnapshotStore

DAY_MS = 86_400_000
# 2024-01-01T00:00:00Z
BASE_TS = 1_704_067_200_000


# ============================================================================
# Snapshot Fixtures
# ============================================================================


@pytest.fixture
def scored_snapshots() -> list[Snapshot]:
    """Three weekly snapshots with a gentle decline, stored newest first."""
    return [
        Snapshot(id="s3", image_uri="file:///photos/3.jpg", timestamp=BASE_TS + 14 * DAY_MS, density_score=70),
        Snapshot(id="s2", image_uri="file:///photos/2.jpg", timestamp=BASE_TS + 7 * DAY_MS, density_score=76),
        Snapshot(id="s1", image_uri="file:///photos/1.jpg", timestamp=BASE_TS, density_score=80),
    ]


@pytest.fixture
def unscored_snapshot() -> Snapshot:
    return Snapshot(id="u1", image_uri="file:///photos/u1.jpg", timestamp=BASE_TS + 21 * DAY_MS)


# ============================================================================
# Store / Estimator Fixtures
# ============================================================================


@pytest.fixture
def memory_store(scored_snapshots: list[Snapshot]) -> InMemorySnapshotStore:
    return InMemorySnapshotStore(scored_snapshots)


@pytest.fixture
def json_store(tmp_path: Path) -> JsonSnapshotStore:
    return JsonSnapshotStore(tmp_path / "data" / "snapshots.json")


@pytest.fixture
def seeded_estimator() -> RandomDensityEstimator:
    return RandomDensityEstimator(low=60, high=100, seed=42)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def reminder_settings() -> ReminderSettings:
    return ReminderSettings(
        frequency="twice-daily",
        morning_time="08:30",
        evening_time="20:15",
        notifications_enabled=True,
    )


@pytest.fixture
def tracker_config(tmp_path: Path) -> TrackerConfig:
    return TrackerConfig(
        store_path=str(tmp_path / "store" / "snapshots.json"),
        estimator_seed=7,
        report_output_dir=str(tmp_path / "reports"),
    )


@pytest.fixture
def temp_config_file(tracker_config: TrackerConfig, tmp_path: Path) -> Path:
    config_file = tmp_path / "hairsnap-config.json"
    tracker_config.save(config_file)
    return config_file
