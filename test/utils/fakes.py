"""
In-memory stand-ins for the snapshot builder's collaborators.

Provides:
- InMemoryFilesystem: Filesystem built from a list of file paths
- UnreadableFilesystem: InMemoryFilesystem with paths that raise PermissionError
- FakeSnapshotSource: SnapshotSource backed by plain lists
"""

from collections.abc import Iterable, Sequence

from cms_bootstrap.exceptions import SnapshotStorageError
from cms_bootstrap.snapshot.filesystem import normalize_path
from cms_bootstrap.snapshot.storage import ContentTypeRecord, PluginRecord, VariableRecord


class InMemoryFilesystem:
    """Directories are implied by the files beneath them; extra empty ones can be listed in ``dirs``."""

    def __init__(self, files: Iterable[str] = (), dirs: Iterable[str] = ()):
        self.files = {normalize_path(f) for f in files}
        self.dirs = {normalize_path(d) for d in dirs}
        for path in list(self.files) + list(self.dirs):
            parts = path.split("/")
            for i in range(1, len(parts)):
                parent = "/".join(parts[:i])
                if parent:
                    self.dirs.add(parent)

    def is_dir(self, path: str) -> bool:
        return normalize_path(path) in self.dirs

    def exists(self, path: str) -> bool:
        path = normalize_path(path)
        return path in self.files or path in self.dirs

    def list_files(self, path: str) -> list[str]:
        directory = normalize_path(path)
        return sorted(f for f in self.files if f.rsplit("/", 1)[0] == directory)


class UnreadableFilesystem(InMemoryFilesystem):
    """``InMemoryFilesystem`` whose listed paths raise ``PermissionError`` on access."""

    def __init__(self, files: Iterable[str] = (), dirs: Iterable[str] = (), unreadable: Iterable[str] = ()):
        super().__init__(files, dirs)
        self.unreadable = {normalize_path(p) for p in unreadable}

    def _check(self, path: str) -> None:
        path = normalize_path(path)
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)

    def is_dir(self, path: str) -> bool:
        self._check(path)
        return super().is_dir(path)

    def exists(self, path: str) -> bool:
        self._check(path)
        return super().exists(path)

    def list_files(self, path: str) -> list[str]:
        self._check(path)
        return super().list_files(path)


class FakeSnapshotSource:
    def __init__(
        self,
        plugins: Sequence[tuple[str, bool]] = (),
        node_types: Sequence[str] = (),
        variables: dict[str, str | None] | None = None,
        fail: bool = False,
    ):
        self.plugins = [PluginRecord(name=name, status=status) for name, status in plugins]
        self.node_types = [ContentTypeRecord(slug=slug) for slug in node_types]
        self.variables = [VariableRecord(name=k, value=v) for k, v in (variables or {}).items()]
        self.fail = fail
        self.requested_variable_names: list[str] = []

    def _check(self, operation: str) -> None:
        if self.fail:
            raise SnapshotStorageError(operation=operation)

    async def fetch_plugins(self) -> list[PluginRecord]:
        self._check("fetch_plugins")
        return list(self.plugins)

    async def fetch_node_types(self) -> list[ContentTypeRecord]:
        self._check("fetch_node_types")
        return list(self.node_types)

    async def fetch_variables(self, names: Sequence[str]) -> list[VariableRecord]:
        self._check("fetch_variables")
        self.requested_variable_names = list(names)
        return [v for v in self.variables if v.name in names]
