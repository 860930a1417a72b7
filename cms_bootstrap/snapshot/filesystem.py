"""
Filesystem Access

The resolver and capability scanner only touch disk through the
``Filesystem`` protocol, so both can run against an in-memory fake.
Paths are plain strings using ``/`` as the canonical separator.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


def normalize_path(path: str) -> str:
    """Use ``/`` as the only separator and drop a trailing one."""
    normalized = path.replace("\\", "/")
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")
    return normalized


def join_path(*parts: str) -> str:
    """Join path segments with the canonical separator."""
    cleaned = [normalize_path(p) for p in parts if p]
    if not cleaned:
        return ""
    head, *tail = cleaned
    return "/".join([head.rstrip("/"), *(p.strip("/") for p in tail)])


class Filesystem(Protocol):
    def is_dir(self, path: str) -> bool: ...

    def exists(self, path: str) -> bool: ...

    def list_files(self, path: str) -> list[str]:
        """Regular files directly inside ``path`` (full paths, non-recursive)."""
        ...


class LocalFilesystem:
    """``Filesystem`` backed by the real disk."""

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def list_files(self, path: str) -> list[str]:
        directory = Path(path)
        if not directory.is_dir():
            return []
        return sorted(normalize_path(str(entry)) for entry in directory.iterdir() if entry.is_file())
