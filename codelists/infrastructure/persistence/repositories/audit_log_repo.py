"""Audit log repository. Append-only; implements IAuditLogRepository."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from codelists.application.dtos.audit_log import (
    AuditEntryCreate,
    AuditEntryResult,
    AuditLogFilter,
)
from codelists.domain.enums import ChangeType
from codelists.infrastructure.persistence.filters import build_audit_predicates
from codelists.infrastructure.persistence.models.audit_log import AuditLog
from codelists.shared.utils.datetime import ensure_utc


def _orm_to_result(row: AuditLog) -> AuditEntryResult:
    """Map ORM to application DTO."""
    return AuditEntryResult(
        id=row.id,
        entity_type=row.entity_type,
        entity_id=row.entity_id,
        entity_code=row.entity_code,
        change_type=ChangeType(row.change_type),
        changed_by=row.changed_by,
        changed_at=ensure_utc(row.changed_at),
        old_values=row.old_values,
        new_values=row.new_values,
    )


class AuditLogRepository:
    """Append-only audit log repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, entry: AuditEntryCreate) -> AuditEntryResult:
        """Append one audit entry; return created record."""
        row = AuditLog(
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            entity_code=entry.entity_code,
            change_type=entry.change_type.value,
            changed_by=entry.changed_by,
            changed_at=entry.changed_at,
            old_values=entry.old_values,
            new_values=entry.new_values,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return _orm_to_result(row)

    async def get_by_id(self, entry_id: int) -> AuditEntryResult | None:
        result = await self.db.execute(select(AuditLog).where(AuditLog.id == entry_id))
        row = result.scalar_one_or_none()
        return _orm_to_result(row) if row else None

    async def list(
        self,
        filters: AuditLogFilter,
        *,
        skip: int = 0,
        limit: int = 25,
    ) -> list[AuditEntryResult]:
        """List entries matching filters (newest first, id breaks ties)."""
        stmt = (
            select(AuditLog)
            .where(*build_audit_predicates(filters))
            .order_by(AuditLog.changed_at.desc(), AuditLog.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [_orm_to_result(r) for r in result.scalars().all()]

    async def count(self, filters: AuditLogFilter) -> int:
        stmt = (
            select(func.count())
            .select_from(AuditLog)
            .where(*build_audit_predicates(filters))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def distinct_entity_types(self) -> list[str]:
        result = await self.db.execute(
            select(AuditLog.entity_type).distinct().order_by(AuditLog.entity_type)
        )
        return list(result.scalars().all())

    async def distinct_changed_by(self) -> list[str]:
        result = await self.db.execute(
            select(AuditLog.changed_by).distinct().order_by(AuditLog.changed_by)
        )
        return list(result.scalars().all())


def make_audit_writer_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], AbstractAsyncContextManager[AuditLogRepository]]:
    """Return a scope factory yielding a repository bound to its own transaction.

    Each scope opens a new session and commits when the block exits, so an
    audit entry never shares a transaction with the business change.
    """

    @asynccontextmanager
    async def scope() -> AsyncIterator[AuditLogRepository]:
        async with session_factory() as session:
            async with session.begin():
                yield AuditLogRepository(session)

    return scope
