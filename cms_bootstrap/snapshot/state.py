"""
Published Snapshot Configuration

``SnapshotConfig`` owns the snapshot the running process reads. It is
created at startup, filled from the persisted artifact and replaced on every
rebuild; consumers receive it explicitly instead of reading globals.

This module must stay importable before settings or the database exist,
so it only depends on the standard library.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "QuickApps"

_MISSING = object()


def load_snapshot_file(path: str | Path) -> dict[str, Any] | None:
    """
    Read the snapshot artifact written by ``SnapshotStore``.

    Returns None when the file is absent, unreadable, malformed or lacks the
    top-level snapshot key.
    """
    snapshot_file = Path(path)
    if not snapshot_file.exists():
        return None
    try:
        payload = json.loads(snapshot_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to read snapshot file %s: %s", snapshot_file, exc)
        return None
    if not isinstance(payload, dict) or not isinstance(payload.get(SNAPSHOT_KEY), dict):
        logger.warning("Snapshot file %s has no '%s' section", snapshot_file, SNAPSHOT_KEY)
        return None
    return payload[SNAPSHOT_KEY]


class SnapshotConfig:
    def __init__(self, snapshot: dict[str, Any] | None = None) -> None:
        self._snapshot: dict[str, Any] | None = None
        if snapshot is not None:
            self.publish(snapshot)

    @classmethod
    def from_file(cls, path: str | Path) -> SnapshotConfig:
        return cls(load_snapshot_file(path))

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def publish(self, snapshot: dict[str, Any]) -> None:
        """Replace the published snapshot with a copy of ``snapshot``."""
        self._snapshot = copy.deepcopy(snapshot)

    def refresh(self, path: str | Path) -> bool:
        """Reload from the artifact at ``path``; keeps the current snapshot if it cannot be read."""
        snapshot = load_snapshot_file(path)
        if snapshot is None:
            return False
        self.publish(snapshot)
        return True

    def clear(self) -> None:
        self._snapshot = None

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    # ── Lookup ────────────────────────────────────────────────────────────────

    @property
    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self._snapshot) if self._snapshot is not None else {}

    @property
    def node_types(self) -> list[str]:
        return list(self.read("node_types", []))

    @property
    def plugins(self) -> dict[str, Any]:
        return dict(self.read("plugins", {}))

    @property
    def variables(self) -> dict[str, Any]:
        return dict(self.read("variables", {}))

    @property
    def languages(self) -> dict[str, Any]:
        return dict(self.read("languages", {}))

    def read(self, key: str, default: Any = None) -> Any:
        """
        Dotted lookup into the snapshot.

        ``key`` may start with the snapshot namespace, so both
        ``"QuickApps.variables.site_title"`` and ``"variables.site_title"``
        work.
        """
        if self._snapshot is None:
            return default
        parts = key.split(".") if key else []
        if parts and parts[0] == SNAPSHOT_KEY:
            parts = parts[1:]

        node: Any = self._snapshot
        for part in parts:
            if not isinstance(node, dict):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default
        return node
