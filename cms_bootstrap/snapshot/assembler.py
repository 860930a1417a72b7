"""
Snapshot Assembler

Pulls plugin, content-type and variable rows from storage, resolves every
active plugin on disk and assembles the default-filled snapshot.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from cms_bootstrap.snapshot.resolver import PluginMetadata, PluginResolver
from cms_bootstrap.snapshot.storage import SnapshotSource

logger = logging.getLogger(__name__)

# Recognised variables and their built-in defaults
DEFAULT_VARIABLES: dict[str, Any] = {
    "url_locale_prefix": 0,
    "site_theme": None,
    "admin_theme": None,
    "site_title": None,
    "site_description": None,
    "default_language": "en-us",
}

SEED_LANGUAGE_CODE = "en-us"
SEED_LANGUAGES: dict[str, dict[str, Any]] = {
    SEED_LANGUAGE_CODE: {
        "status": 1,
        "name": "English",
        "native": "English",
        "direction": "ltr",
    },
}


@dataclass
class Snapshot:
    node_types: list[str] = field(default_factory=list)
    plugins: dict[str, PluginMetadata] = field(default_factory=dict)
    variables: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_VARIABLES))
    languages: dict[str, dict[str, Any]] = field(default_factory=lambda: copy.deepcopy(SEED_LANGUAGES))

    def to_dict(self) -> dict[str, Any]:
        return {
            "node_types": list(self.node_types),
            "plugins": {name: meta.to_dict() for name, meta in self.plugins.items()},
            "variables": dict(self.variables),
            "languages": copy.deepcopy(self.languages),
        }


def build_default_snapshot() -> Snapshot:
    """Snapshot holding only the built-in defaults."""
    return Snapshot()


class SnapshotAssembler:
    def __init__(self, source: SnapshotSource, resolver: PluginResolver) -> None:
        self.source = source
        self.resolver = resolver

    async def assemble(self) -> Snapshot:
        """
        Build a fresh snapshot from the current storage and filesystem state.

        Storage failures propagate. Active plugins that cannot be located
        are left out and the build continues.
        """
        snapshot = build_default_snapshot()

        for node_type in await self.source.fetch_node_types():
            snapshot.node_types.append(node_type.slug)

        for variable in await self.source.fetch_variables(list(DEFAULT_VARIABLES)):
            if variable.name in DEFAULT_VARIABLES:
                snapshot.variables[variable.name] = variable.value

        skipped = []
        for record in await self.source.fetch_plugins():
            if not record.status:
                continue
            metadata = self.resolver.resolve(record)
            if metadata is None:
                skipped.append(record.name)
                continue
            snapshot.plugins[record.name] = metadata

        logger.info(
            "Snapshot assembled: %d node types, %d plugins, %d skipped",
            len(snapshot.node_types),
            len(snapshot.plugins),
            len(skipped),
            extra={"node_types": len(snapshot.node_types), "plugins": len(snapshot.plugins), "skipped": skipped},
        )
        return snapshot
