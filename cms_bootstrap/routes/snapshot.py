"""
Snapshot Administration Routes

GET  /api/v1/snapshot          → currently published snapshot
POST /api/v1/snapshot/rebuild  → rebuild from storage + disk, optional overrides

Rebuild requires the ``X-Admin-Token`` header to match ``settings.admin_token``
and is disabled while no token is configured.
"""

from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from cms_bootstrap.config import settings
from cms_bootstrap.database import get_db
from cms_bootstrap.exceptions import SnapshotNotLoadedError
from cms_bootstrap.snapshot.assembler import SnapshotAssembler
from cms_bootstrap.snapshot.filesystem import LocalFilesystem
from cms_bootstrap.snapshot.resolver import PluginResolver
from cms_bootstrap.snapshot.state import SnapshotConfig
from cms_bootstrap.snapshot.storage import SQLAlchemySnapshotSource
from cms_bootstrap.snapshot.store import SnapshotStore

router = APIRouter(tags=["Snapshot"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class RebuildRequest(BaseModel):
    overrides: dict[str, Any] = Field(default_factory=dict)


# ── Dependencies ───────────────────────────────────────────────────────────────


def get_snapshot_config(request: Request) -> SnapshotConfig:
    return request.app.state.snapshot_config


def get_plugin_resolver() -> PluginResolver:
    # Persisted plugin paths must not depend on the working directory
    plugin_paths = [str(Path(root).resolve()) for root in settings.plugin_paths]
    return PluginResolver(LocalFilesystem(), plugin_paths, str(Path(settings.app_root).resolve()))


def get_snapshot_store(
    config: SnapshotConfig = Depends(get_snapshot_config),
    resolver: PluginResolver = Depends(get_plugin_resolver),
    db: AsyncSession = Depends(get_db),
) -> SnapshotStore:
    assembler = SnapshotAssembler(SQLAlchemySnapshotSource(db), resolver)
    return SnapshotStore(assembler, config, settings.snapshot_path)


def require_admin_token(x_admin_token: str | None = Header(default=None)) -> None:
    if not settings.admin_token:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Snapshot rebuild is disabled",
        )
    if x_admin_token is None or not secrets.compare_digest(x_admin_token, settings.admin_token):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin token",
        )


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("/snapshot")
async def get_snapshot(config: SnapshotConfig = Depends(get_snapshot_config)) -> dict[str, Any]:
    if not config.is_loaded:
        raise SnapshotNotLoadedError()
    return config.snapshot


@router.post("/snapshot/rebuild", dependencies=[Depends(require_admin_token)])
async def rebuild_snapshot(
    data: RebuildRequest | None = None,
    store: SnapshotStore = Depends(get_snapshot_store),
) -> dict[str, Any]:
    overrides = data.overrides if data else {}
    await store.build(overrides)
    logger.info("Snapshot rebuilt via admin trigger", extra={"path": str(store.snapshot_path)})
    return store.config.snapshot
