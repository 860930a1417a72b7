"""
Snapshot Storage

Read-only access to the three tables the snapshot is built from. The
assembler depends on the ``SnapshotSource`` protocol; the SQLAlchemy
implementation below is the production one.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms_bootstrap.exceptions import SnapshotStorageError
from cms_bootstrap.models import NodeType, Plugin, Variable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginRecord:
    name: str
    status: bool


@dataclass(frozen=True)
class ContentTypeRecord:
    slug: str


@dataclass(frozen=True)
class VariableRecord:
    name: str
    value: str | None


class SnapshotSource(Protocol):
    async def fetch_plugins(self) -> list[PluginRecord]: ...

    async def fetch_node_types(self) -> list[ContentTypeRecord]: ...

    async def fetch_variables(self, names: Sequence[str]) -> list[VariableRecord]: ...


class SQLAlchemySnapshotSource:
    """``SnapshotSource`` reading from the application database."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def fetch_plugins(self) -> list[PluginRecord]:
        try:
            result = await self.db.execute(select(Plugin.name, Plugin.status).order_by(Plugin.id))
        except SQLAlchemyError as e:
            logger.error(f"Failed to read plugins: {e}")
            raise SnapshotStorageError(operation="fetch_plugins") from e
        return [PluginRecord(name=row.name, status=bool(row.status)) for row in result.all()]

    async def fetch_node_types(self) -> list[ContentTypeRecord]:
        try:
            result = await self.db.execute(select(NodeType.slug).order_by(NodeType.id))
        except SQLAlchemyError as e:
            logger.error(f"Failed to read node types: {e}")
            raise SnapshotStorageError(operation="fetch_node_types") from e
        return [ContentTypeRecord(slug=slug) for slug in result.scalars().all()]

    async def fetch_variables(self, names: Sequence[str]) -> list[VariableRecord]:
        try:
            result = await self.db.execute(
                select(Variable.name, Variable.value).where(Variable.name.in_(list(names))).order_by(Variable.id)
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to read variables: {e}")
            raise SnapshotStorageError(operation="fetch_variables") from e
        return [VariableRecord(name=row.name, value=row.value) for row in result.all()]
