"""
Plugin Resolver

Maps a plugin name to its directory by searching the ordered plugin roots,
then derives the metadata stored for it in the snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cms_bootstrap.snapshot.capabilities import (
    DEFAULT_SOURCE_EXTENSION,
    PluginCapabilities,
    scan_capabilities,
)
from cms_bootstrap.snapshot.filesystem import Filesystem, join_path, normalize_path

if TYPE_CHECKING:
    from cms_bootstrap.snapshot.storage import PluginRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginLayout:
    """Fixed locations inside every plugin directory."""

    events_dir: str = "src/Event"
    help_file: str = "src/Template/Element/help.html"
    settings_file: str = "src/Template/Element/settings.html"
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    theme_suffix: str = "Theme"


@dataclass
class PluginMetadata:
    """
    Derived information about one active plugin.

    ``to_dict()`` produces the structure stored under ``plugins.<name>``
    in the snapshot, using the camelCase keys consumers read.
    """

    name: str
    path: str
    status: bool
    is_theme: bool = False
    is_core: bool = False
    has_help: bool = False
    has_settings: bool = False
    capabilities: PluginCapabilities = field(default_factory=PluginCapabilities)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "isTheme": self.is_theme,
            "isCore": self.is_core,
            "hasHelp": self.has_help,
            "hasSettings": self.has_settings,
            "capabilities": self.capabilities.to_dict(),
            "status": self.status,
            "path": self.path,
        }


class PluginResolver:
    def __init__(
        self,
        fs: Filesystem,
        plugin_paths: Sequence[str],
        app_root: str,
        layout: PluginLayout | None = None,
    ) -> None:
        self.fs = fs
        self.plugin_paths = list(plugin_paths)
        self.app_root = normalize_path(app_root)
        self.layout = layout or PluginLayout()

    def locate(self, name: str) -> str | None:
        """
        Return the first candidate ``<root>/<name>`` directory that exists.

        A root that cannot be inspected is logged and treated as not
        containing the plugin.
        """
        for root in self.plugin_paths:
            candidate = join_path(root, name)
            try:
                if self.fs.is_dir(candidate):
                    return candidate
            except OSError as exc:
                logger.warning(
                    "Cannot inspect %s for plugin %s: %s",
                    candidate,
                    name,
                    exc,
                    extra={"plugin": name, "path": candidate},
                )
        return None

    def is_core_path(self, path: str) -> bool:
        """True when ``path`` lies inside the application's own source tree."""
        normalized = normalize_path(path)
        return normalized == self.app_root or normalized.startswith(self.app_root.rstrip("/") + "/")

    def is_theme(self, name: str) -> bool:
        return name.endswith(self.layout.theme_suffix)

    def resolve(self, record: PluginRecord) -> PluginMetadata | None:
        """
        Build metadata for ``record``.

        Returns None when no plugin root contains the plugin; the caller
        leaves it out of the snapshot. A located plugin whose files cannot
        be read is kept: an unreadable extension directory yields empty
        capabilities and an unreadable fragment counts as absent.
        """
        plugin_path = self.locate(record.name)
        if plugin_path is None:
            logger.warning(
                "Plugin %s not found in any plugin root; skipping",
                record.name,
                extra={"plugin": record.name},
            )
            return None

        events_dir = join_path(plugin_path, self.layout.events_dir)
        try:
            capabilities = scan_capabilities(self.fs, events_dir, self.layout.source_extension)
        except OSError as exc:
            logger.warning(
                "Cannot scan capabilities of plugin %s: %s",
                record.name,
                exc,
                extra={"plugin": record.name, "path": events_dir},
            )
            capabilities = PluginCapabilities()

        return PluginMetadata(
            name=record.name,
            path=plugin_path,
            status=record.status,
            is_theme=self.is_theme(record.name),
            is_core=self.is_core_path(plugin_path),
            has_help=self._fragment_exists(record.name, join_path(plugin_path, self.layout.help_file)),
            has_settings=self._fragment_exists(record.name, join_path(plugin_path, self.layout.settings_file)),
            capabilities=capabilities,
        )

    def _fragment_exists(self, plugin: str, path: str) -> bool:
        try:
            return self.fs.exists(path)
        except OSError as exc:
            logger.warning(
                "Cannot check %s for plugin %s: %s",
                path,
                plugin,
                exc,
                extra={"plugin": plugin, "path": path},
            )
            return False
