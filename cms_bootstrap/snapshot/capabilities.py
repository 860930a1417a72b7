"""
Capability Scanner

Classifies the class files found in a plugin's extension-point directory
into hooks, hooktags and fields by file-name suffix. Nothing is imported;
the resulting maps only record where each class lives.
"""

from __future__ import annotations

import enum
import posixpath
from dataclasses import dataclass, field
from typing import Any

from cms_bootstrap.snapshot.filesystem import Filesystem, normalize_path

DEFAULT_SOURCE_EXTENSION = ".py"


class CapabilityKind(enum.Enum):
    """
    Closed set of capability kinds.

    Member order is the classification order: a class name is tested
    against ``HOOK``, then ``HOOKTAG``, then ``FIELD``, and the first
    matching suffix decides its kind.
    """

    HOOK = ("Hook", "hooks")
    HOOKTAG = ("Hooktag", "hooktags")
    FIELD = ("Field", "fields")

    def __init__(self, suffix: str, map_key: str) -> None:
        self.suffix = suffix
        self.map_key = map_key

    @property
    def namespace(self) -> str:
        return f"{self.suffix}\\"


def classify(class_name: str) -> CapabilityKind | None:
    """Return the kind a class name belongs to, or None if it matches no suffix."""
    for kind in CapabilityKind:
        if class_name.endswith(kind.suffix):
            return kind
    return None


@dataclass
class CapabilityEntry:
    namespace: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"namespace": self.namespace, "path": self.path}


@dataclass
class PluginCapabilities:
    hooks: dict[str, CapabilityEntry] = field(default_factory=dict)
    hooktags: dict[str, CapabilityEntry] = field(default_factory=dict)
    fields: dict[str, CapabilityEntry] = field(default_factory=dict)

    def for_kind(self, kind: CapabilityKind) -> dict[str, CapabilityEntry]:
        return getattr(self, kind.map_key)

    def register(self, kind: CapabilityKind, class_name: str, path: str) -> None:
        self.for_kind(kind)[kind.namespace + class_name] = CapabilityEntry(namespace=kind.namespace, path=path)

    def is_empty(self) -> bool:
        return not (self.hooks or self.hooktags or self.fields)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            kind.map_key: {name: entry.to_dict() for name, entry in self.for_kind(kind).items()}
            for kind in CapabilityKind
        }


def scan_capabilities(
    fs: Filesystem,
    directory: str,
    extension: str = DEFAULT_SOURCE_EXTENSION,
) -> PluginCapabilities:
    """
    Scan ``directory`` (non-recursively) for capability classes.

    A missing directory yields empty maps. Files without ``extension`` or
    whose base name matches no capability suffix are skipped.
    """
    capabilities = PluginCapabilities()
    if not fs.is_dir(directory):
        return capabilities

    for file_path in sorted(fs.list_files(directory)):
        file_path = normalize_path(file_path)
        file_name = posixpath.basename(file_path)
        if not file_name.endswith(extension):
            continue
        class_name = file_name[: -len(extension)] if extension else file_name
        kind = classify(class_name)
        if kind is None:
            continue
        capabilities.register(kind, class_name, posixpath.dirname(file_path))

    return capabilities
