"""
Pytest configuration and fixtures for the snapshot builder tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from cms_bootstrap.snapshot.assembler import SnapshotAssembler  # noqa: E402
from cms_bootstrap.snapshot.resolver import PluginResolver  # noqa: E402
from cms_bootstrap.snapshot.state import SnapshotConfig  # noqa: E402
from cms_bootstrap.snapshot.store import SnapshotStore  # noqa: E402
from utils.fakes import FakeSnapshotSource, InMemoryFilesystem  # noqa: E402

APP_ROOT = "/srv/cms/src"
CORE_PLUGINS = "/srv/cms/src/Plugin"
THIRD_PARTY_PLUGINS = "/srv/cms/plugins"


@pytest.fixture
def plugin_fs() -> InMemoryFilesystem:
    """A core plugin tree plus one third-party plugin with capabilities."""
    return InMemoryFilesystem(
        files=[
            f"{CORE_PLUGINS}/System/src/Event/SystemHook.py",
            f"{CORE_PLUGINS}/System/src/Template/Element/help.html",
            f"{CORE_PLUGINS}/System/src/Template/Element/settings.html",
            f"{CORE_PLUGINS}/FrontendTheme/src/Template/Element/help.html",
            f"{THIRD_PARTY_PLUGINS}/Blog/src/Event/PublishHook.py",
            f"{THIRD_PARTY_PLUGINS}/Blog/src/Event/ShortcodeHooktag.py",
            f"{THIRD_PARTY_PLUGINS}/Blog/src/Event/RatingField.py",
            f"{THIRD_PARTY_PLUGINS}/Blog/src/Event/helpers.py",
        ],
    )


@pytest.fixture
def resolver(plugin_fs) -> PluginResolver:
    return PluginResolver(plugin_fs, [CORE_PLUGINS, THIRD_PARTY_PLUGINS], APP_ROOT)


@pytest.fixture
def source() -> FakeSnapshotSource:
    return FakeSnapshotSource(
        plugins=[("System", True), ("FrontendTheme", True), ("Blog", True), ("Disabled", False), ("Ghost", True)],
        node_types=["article", "page"],
        variables={"site_title": "My Site", "site_theme": "FrontendTheme"},
    )


@pytest.fixture
def assembler(source, resolver) -> SnapshotAssembler:
    return SnapshotAssembler(source, resolver)


@pytest.fixture
def snapshot_config() -> SnapshotConfig:
    return SnapshotConfig()


@pytest.fixture
def snapshot_path(tmp_path):
    return tmp_path / "tmp" / "snapshot.json"


@pytest.fixture
def store(assembler, snapshot_config, snapshot_path) -> SnapshotStore:
    return SnapshotStore(assembler, snapshot_config, snapshot_path)
