"""Voltage level use cases: a flat codelist with audited mutations."""

from __future__ import annotations

from datetime import date

from codelists.application.dtos.voltage_level import VoltageLevelData
from codelists.application.interfaces.repositories import IVoltageLevelRepository
from codelists.application.interfaces.services import IAuditRecorder, IChangePublisher
from codelists.domain.entities.voltage_level import VoltageLevel
from codelists.domain.enums import ChangeType
from codelists.domain.exceptions import (
    CodeAlreadyExistsException,
    ResourceNotFoundException,
)
from codelists.shared.utils.datetime import today_utc

ENTITY_TYPE = "VoltageLevel"
CODELIST_NAME = "Úrovně napětí"
CODELIST_CODE = "VOLTAGE_LEVEL"


class VoltageLevelService:
    """CRUD for voltage levels with audit trail and change notification."""

    def __init__(
        self,
        repo: IVoltageLevelRepository,
        recorder: IAuditRecorder,
        publisher: IChangePublisher,
    ) -> None:
        self.repo = repo
        self.recorder = recorder
        self.publisher = publisher

    async def find_all(self) -> list[VoltageLevel]:
        return await self.repo.list_all()

    async def find_all_currently_valid(self, on: date | None = None) -> list[VoltageLevel]:
        """Levels whose validity window contains on (today by default)."""
        day = on or today_utc()
        return [level for level in await self.repo.list_all() if level.is_valid_on(day)]

    async def find_by_id(self, level_id: int) -> VoltageLevel:
        level = await self.repo.get_by_id(level_id)
        if level is None:
            raise ResourceNotFoundException(ENTITY_TYPE, level_id)
        return level

    async def find_by_code(self, code: str) -> VoltageLevel:
        level = await self.repo.get_by_code(code)
        if level is None:
            raise ResourceNotFoundException(ENTITY_TYPE, code)
        return level

    async def create(
        self, data: VoltageLevelData, actor: str | None = None
    ) -> VoltageLevel:
        async with self.repo.transaction():
            if await self.repo.exists_by_code(data.code):
                raise CodeAlreadyExistsException(ENTITY_TYPE, data.code)
            level = await self.repo.create(data)

        await self.recorder.log_create(
            ENTITY_TYPE, level.id, level.code, level.to_snapshot(), actor
        )
        await self._announce(ChangeType.CREATE, level, actor)
        return level

    async def update(
        self, level_id: int, data: VoltageLevelData, actor: str | None = None
    ) -> VoltageLevel:
        async with self.repo.transaction():
            existing = await self.find_by_id(level_id)
            if data.code != existing.code and await self.repo.exists_by_code(data.code):
                raise CodeAlreadyExistsException(ENTITY_TYPE, data.code)
            before = existing.to_snapshot()
            level = await self.repo.update(level_id, data)

        await self.recorder.log_update(
            ENTITY_TYPE, level.id, level.code, before, level.to_snapshot(), actor
        )
        await self._announce(ChangeType.UPDATE, level, actor)
        return level

    async def delete(self, level_id: int, actor: str | None = None) -> None:
        async with self.repo.transaction():
            existing = await self.find_by_id(level_id)
            await self.repo.delete(level_id)

        await self.recorder.log_delete(
            ENTITY_TYPE, existing.id, existing.code, existing.to_snapshot(), actor
        )
        await self._announce(ChangeType.DELETE, existing, actor)

    async def _announce(
        self, change_type: ChangeType, level: VoltageLevel, actor: str | None
    ) -> None:
        await self.publisher.publish_change(
            codelist_name=CODELIST_NAME,
            codelist_code=CODELIST_CODE,
            change_type=change_type,
            entity_id=level.id,
            entity_code=level.code,
            entity_name=level.name_cs,
            changed_by=self.recorder.resolve_actor(actor),
        )
