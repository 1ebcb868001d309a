"""Voltage level repository. Implements IVoltageLevelRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from codelists.application.dtos.voltage_level import VoltageLevelData
from codelists.domain.entities.voltage_level import VoltageLevel
from codelists.infrastructure.persistence.models.voltage_level import VoltageLevelModel
from codelists.infrastructure.persistence.repositories.base import BaseRepository
from codelists.shared.utils.datetime import ensure_utc


def _orm_to_entity(row: VoltageLevelModel) -> VoltageLevel:
    """Map ORM to domain entity."""
    return VoltageLevel(
        id=row.id,
        code=row.code,
        name_cs=row.name_cs,
        name_en=row.name_en,
        voltage_range_cs=row.voltage_range_cs,
        voltage_range_en=row.voltage_range_en,
        valid_from=row.valid_from,
        valid_to=row.valid_to,
        sort_order=row.sort_order,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
    )


def _apply(row: VoltageLevelModel, data: VoltageLevelData) -> None:
    row.code = data.code
    row.name_cs = data.name_cs
    row.name_en = data.name_en
    row.voltage_range_cs = data.voltage_range_cs
    row.voltage_range_en = data.voltage_range_en
    row.valid_from = data.valid_from
    row.valid_to = data.valid_to
    row.sort_order = data.sort_order


class VoltageLevelRepository(BaseRepository[VoltageLevelModel]):
    """Voltage level persistence, ordered by sort_order then code."""

    entity_type = "VoltageLevel"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, VoltageLevelModel)

    async def get_by_id(self, level_id: int) -> VoltageLevel | None:
        row = await self._get_row(level_id)
        return _orm_to_entity(row) if row else None

    async def get_by_code(self, code: str) -> VoltageLevel | None:
        result = await self.db.execute(
            select(VoltageLevelModel).where(VoltageLevelModel.code == code)
        )
        row = result.scalar_one_or_none()
        return _orm_to_entity(row) if row else None

    async def exists_by_code(self, code: str) -> bool:
        return await self._exists(VoltageLevelModel.code == code)

    async def list_all(self) -> list[VoltageLevel]:
        result = await self.db.execute(
            select(VoltageLevelModel).order_by(
                VoltageLevelModel.sort_order.is_(None),
                VoltageLevelModel.sort_order,
                VoltageLevelModel.code,
            )
        )
        return [_orm_to_entity(r) for r in result.scalars().all()]

    async def create(self, data: VoltageLevelData) -> VoltageLevel:
        row = VoltageLevelModel()
        _apply(row, data)
        return _orm_to_entity(await self._insert(row))

    async def update(self, level_id: int, data: VoltageLevelData) -> VoltageLevel:
        row = await self._require_row(level_id)
        _apply(row, data)
        return _orm_to_entity(await self._save(row))

    async def delete(self, level_id: int) -> None:
        row = await self._require_row(level_id)
        await self.db.delete(row)
        await self.db.flush()
