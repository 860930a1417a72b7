"""
Snapshot Store

Applies caller overrides to a freshly assembled snapshot, publishes it to
the process's ``SnapshotConfig`` and persists it as a self-contained JSON
artifact that ``load_snapshot_file`` can read at cold start.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from cms_bootstrap.exceptions import SnapshotPersistenceError
from cms_bootstrap.snapshot.assembler import SnapshotAssembler
from cms_bootstrap.snapshot.merge import deep_merge
from cms_bootstrap.snapshot.state import SNAPSHOT_KEY, SnapshotConfig

logger = logging.getLogger(__name__)


def write_snapshot_file(path: str | Path, snapshot: dict[str, Any]) -> None:
    """
    Atomically write ``{SNAPSHOT_KEY: snapshot}`` to ``path``.

    The payload goes to a temporary file in the same directory which then
    replaces ``path``; an existing artifact is untouched if anything fails.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps({SNAPSHOT_KEY: snapshot}, indent=2, ensure_ascii=False)

    tmp_fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


class SnapshotStore:
    def __init__(
        self,
        assembler: SnapshotAssembler,
        config: SnapshotConfig,
        snapshot_path: str | Path,
    ) -> None:
        self.assembler = assembler
        self.config = config
        self.snapshot_path = Path(snapshot_path)

    async def build(self, overrides: Any = None) -> None:
        """
        Rebuild, publish and persist the snapshot.

        Overrides of any shape are merged, never rejected; see ``as_mapping``.
        Storage errors propagate before anything is published or written.
        If the artifact cannot be written the new snapshot stays published
        for this process only and ``SnapshotPersistenceError`` is raised.
        """
        logger.info("Building snapshot", extra={"path": str(self.snapshot_path)})
        snapshot = (await self.assembler.assemble()).to_dict()
        if overrides:
            snapshot = deep_merge(snapshot, overrides)

        self.config.publish(snapshot)

        try:
            write_snapshot_file(self.snapshot_path, snapshot)
        except (OSError, TypeError, ValueError) as exc:
            logger.error(
                "Snapshot published in memory but not persisted; next process start will load a stale snapshot: %s",
                exc,
                extra={"path": str(self.snapshot_path)},
            )
            raise SnapshotPersistenceError(str(self.snapshot_path), reason=str(exc)) from exc

        logger.info("Snapshot written to %s", self.snapshot_path, extra={"path": str(self.snapshot_path)})
