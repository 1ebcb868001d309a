"""Building classification repository. Implements IClassificationRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, String, exists, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from codelists.application.dtos.classification import ClassificationNodeData
from codelists.domain.entities.classification import ClassificationNode
from codelists.domain.exceptions import HasChildrenException
from codelists.infrastructure.persistence.models.classification import (
    BuildingClassification,
)
from codelists.infrastructure.persistence.repositories.base import BaseRepository
from codelists.shared.telemetry.logging import get_logger
from codelists.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)

_Parent = aliased(BuildingClassification, name="parent")


def _orm_to_entity(
    row: BuildingClassification,
    parent_code: str | None = None,
    parent_name: str | None = None,
) -> ClassificationNode:
    """Map ORM row (plus joined parent columns) to a flat domain node."""
    return ClassificationNode(
        id=row.id,
        code=row.code,
        name_cs=row.name_cs,
        name_en=row.name_en,
        level=row.level,
        parent_id=row.parent_id,
        description_cs=row.description_cs,
        description_en=row.description_en,
        valid_from=row.valid_from,
        valid_to=row.valid_to,
        sort_order=row.sort_order,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
        parent_code=parent_code,
        parent_name=parent_name,
    )


def _apply(row: BuildingClassification, data: ClassificationNodeData, parent_id: int | None) -> None:
    row.code = data.code
    row.name_cs = data.name_cs
    row.name_en = data.name_en
    row.description_cs = data.description_cs
    row.description_en = data.description_en
    row.level = data.level
    row.parent_id = parent_id
    row.valid_from = data.valid_from
    row.valid_to = data.valid_to
    row.sort_order = data.sort_order


class BuildingClassificationRepository(BaseRepository[BuildingClassification]):
    """KSO node persistence. Every list is ordered by code; children are never loaded."""

    entity_type = "BuildingClassification"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, BuildingClassification)

    def _select(self) -> Select[Any]:
        return (
            select(BuildingClassification, _Parent.code, _Parent.name_cs)
            .outerjoin(_Parent, BuildingClassification.parent_id == _Parent.id)
            .order_by(BuildingClassification.code)
        )

    async def _fetch(self, stmt: Select[Any]) -> list[ClassificationNode]:
        result = await self.db.execute(stmt)
        return [
            _orm_to_entity(row, parent_code, parent_name)
            for row, parent_code, parent_name in result.all()
        ]

    async def _fetch_one(self, stmt: Select[Any]) -> ClassificationNode | None:
        nodes = await self._fetch(stmt)
        return nodes[0] if nodes else None

    async def get_by_id(self, node_id: int) -> ClassificationNode | None:
        return await self._fetch_one(
            self._select().where(BuildingClassification.id == node_id)
        )

    async def get_by_code(self, code: str) -> ClassificationNode | None:
        return await self._fetch_one(
            self._select().where(BuildingClassification.code == code)
        )

    async def exists_by_code(self, code: str) -> bool:
        return await self._exists(BuildingClassification.code == code)

    async def list_all(self) -> list[ClassificationNode]:
        return await self._fetch(self._select())

    async def list_roots(self) -> list[ClassificationNode]:
        return await self._fetch(
            self._select().where(BuildingClassification.parent_id.is_(None))
        )

    async def list_by_parent(self, parent_id: int) -> list[ClassificationNode]:
        return await self._fetch(
            self._select().where(BuildingClassification.parent_id == parent_id)
        )

    async def list_by_level(self, level: int) -> list[ClassificationNode]:
        return await self._fetch(
            self._select().where(BuildingClassification.level == level)
        )

    async def search(self, query: str) -> list[ClassificationNode]:
        """Case-insensitive substring match on code, name_cs and name_en."""
        needle = query.lower()
        columns = (
            BuildingClassification.code,
            BuildingClassification.name_cs,
            BuildingClassification.name_en,
        )
        return await self._fetch(
            self._select().where(
                or_(
                    *(
                        func.lower(column, type_=String).contains(needle, autoescape=True)
                        for column in columns
                    )
                )
            )
        )

    async def has_children(self, node_id: int) -> bool:
        stmt = select(
            exists().where(BuildingClassification.parent_id == node_id)
        )
        result = await self.db.execute(stmt)
        return bool(result.scalar())

    async def create(
        self, data: ClassificationNodeData, parent_id: int | None
    ) -> ClassificationNode:
        row = BuildingClassification()
        _apply(row, data, parent_id)
        row = await self._insert(row)
        return await self._reload(row.id)

    async def update(
        self, node_id: int, data: ClassificationNodeData, parent_id: int | None
    ) -> ClassificationNode:
        row = await self._require_row(node_id)
        _apply(row, data, parent_id)
        await self._save(row)
        return await self._reload(node_id)

    async def delete(self, node_id: int) -> None:
        """Delete the node; a child row still referencing it raises HasChildrenException."""
        row = await self._require_row(node_id)
        await self.db.delete(row)
        try:
            await self.db.flush()
        except IntegrityError as exc:
            logger.info(
                "Delete of classification %s refused by foreign key: %s", node_id, exc.orig
            )
            raise HasChildrenException(node_id) from exc

    async def _reload(self, node_id: int) -> ClassificationNode:
        node = await self.get_by_id(node_id)
        if node is None:
            raise RuntimeError(f"Classification {node_id} vanished inside its own transaction")
        return node
