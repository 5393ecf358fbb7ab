"""JSON-file snapshot store: persists the snapshot collection to disk."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Optional

from hairsnap.models.snapshot import Snapshot, SnapshotCollection

logger = logging.getLogger(__name__)


class JsonSnapshotStore:
    """Stores snapshots in a single JSON document, rewritten on every change."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> SnapshotCollection:
        """Load the collection from disk, or start an empty one."""
        if self.path.exists():
            try:
                with open(self.path) as f:
                    data = json.load(f)
                return SnapshotCollection(**data)
            except Exception as e:
                logger.warning("Failed to load snapshot store: %s. Starting empty.", e)
        return SnapshotCollection()

    def _write(self, collection: SnapshotCollection) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        collection.last_updated = time.strftime("%Y-%m-%dT%H:%M:%SZ")
        with open(self.path, "w") as f:
            json.dump(collection.model_dump(mode="json"), f, indent=2)
        logger.debug("Saved %d snapshots to %s", len(collection.snapshots), self.path)

    def list(self) -> list[Snapshot]:
        return sorted(self._load().snapshots.values(), key=lambda s: s.timestamp)

    def get(self, snapshot_id: str) -> Optional[Snapshot]:
        return self._load().snapshots.get(snapshot_id)

    def save(self, snapshot: Snapshot) -> None:
        collection = self._load()
        collection.snapshots[snapshot.id] = snapshot
        self._write(collection)

    def delete(self, snapshot_id: str) -> bool:
        collection = self._load()
        if collection.snapshots.pop(snapshot_id, None) is None:
            return False
        self._write(collection)
        logger.info("Deleted snapshot %s", snapshot_id)
        return True
