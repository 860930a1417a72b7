"""
Snapshot Builder

    store.SnapshotStore         : build(overrides) → publish + persist
    assembler.SnapshotAssembler : storage + filesystem → Snapshot
    resolver.PluginResolver     : plugin name → PluginMetadata
    capabilities.scan_capabilities: extension directory → hooks/hooktags/fields
    state.SnapshotConfig        : injectable published snapshot
    state.load_snapshot_file    : cold-start reader for the persisted artifact

Nothing is re-exported here: ``state`` must stay importable without
pulling in settings or the database.
"""
