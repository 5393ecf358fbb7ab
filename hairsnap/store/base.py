"""Snapshot storage interface and an in-memory implementation."""

from __future__ import annotations

from typing import Optional, Protocol

from hairsnap.models.snapshot import Snapshot


class SnapshotStore(Protocol):
    def list(self) -> list[Snapshot]:
        """All snapshots, oldest first."""
        ...

    def get(self, snapshot_id: str) -> Optional[Snapshot]:
        ...

    def save(self, snapshot: Snapshot) -> None:
        """Insert, or replace the snapshot with the same id."""
        ...

    def delete(self, snapshot_id: str) -> bool:
        """Remove a snapshot. Returns False if it was not stored."""
        ...


class InMemorySnapshotStore:
    def __init__(self, snapshots: list[Snapshot] | None = None):
        self._snapshots: dict[str, Snapshot] = {}
        for s in snapshots or []:
            self.save(s)

    def list(self) -> list[Snapshot]:
        return sorted(self._snapshots.values(), key=lambda s: s.timestamp)

    def get(self, snapshot_id: str) -> Optional[Snapshot]:
        return self._snapshots.get(snapshot_id)

    def save(self, snapshot: Snapshot) -> None:
        self._snapshots[snapshot.id] = snapshot

    def delete(self, snapshot_id: str) -> bool:
        return self._snapshots.pop(snapshot_id, None) is not None
