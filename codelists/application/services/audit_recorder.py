"""Audit recorder: appends one immutable audit entry per codelist mutation.

Each entry is written through its own writer scope (a fresh session and
transaction), so it never joins or rolls back with the caller's business
transaction. Storage errors propagate unchanged; there are no retries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from codelists.application.dtos.audit_log import AuditEntryCreate, AuditEntryResult
from codelists.application.interfaces.repositories import AuditWriterScope
from codelists.domain.enums import ChangeType
from codelists.domain.value_objects import ValueSnapshot
from codelists.shared.telemetry.logging import get_logger
from codelists.shared.utils.datetime import utc_now

logger = get_logger(__name__)

DEFAULT_SYSTEM_ACTOR = "system"


class AuditRecorder:
    """Records CREATE/UPDATE/DELETE entries with before/after value snapshots."""

    def __init__(
        self,
        writer_scope: AuditWriterScope,
        system_actor: str = DEFAULT_SYSTEM_ACTOR,
    ) -> None:
        self._writer_scope = writer_scope
        self._system_actor = system_actor

    async def log_create(
        self,
        entity_type: str,
        entity_id: int,
        entity_code: str | None,
        new_values: ValueSnapshot | Mapping[str, Any],
        actor: str | None = None,
    ) -> AuditEntryResult:
        """Record a creation. old_values is always absent; an empty snapshot is stored as {}."""
        return await self._write(
            entity_type,
            entity_id,
            entity_code,
            ChangeType.CREATE,
            old_values=None,
            new_values=self._serialize(ValueSnapshot.of(new_values)),
            actor=actor,
        )

    async def log_update(
        self,
        entity_type: str,
        entity_id: int,
        entity_code: str | None,
        old_values: ValueSnapshot | Mapping[str, Any],
        new_values: ValueSnapshot | Mapping[str, Any],
        actor: str | None = None,
    ) -> AuditEntryResult | None:
        """Record an update, or do nothing when both snapshots are equal.

        Returns:
            The persisted entry, or None when the update was a no-op.
        """
        before = ValueSnapshot.of(old_values)
        after = ValueSnapshot.of(new_values)
        if before == after:
            logger.debug(
                "Skipping audit for %s %s: no values changed", entity_type, entity_id
            )
            return None
        logger.debug(
            "Changed fields of %s %s: %s",
            entity_type,
            entity_id,
            ", ".join(before.changed_keys(after)),
        )
        return await self._write(
            entity_type,
            entity_id,
            entity_code,
            ChangeType.UPDATE,
            old_values=self._serialize(before),
            new_values=self._serialize(after),
            actor=actor,
        )

    async def log_delete(
        self,
        entity_type: str,
        entity_id: int,
        entity_code: str | None,
        old_values: ValueSnapshot | Mapping[str, Any],
        actor: str | None = None,
    ) -> AuditEntryResult:
        """Record a deletion. new_values is always absent."""
        return await self._write(
            entity_type,
            entity_id,
            entity_code,
            ChangeType.DELETE,
            old_values=self._serialize(ValueSnapshot.of(old_values)),
            new_values=None,
            actor=actor,
        )

    def resolve_actor(self, actor: str | None) -> str:
        """Return the trimmed actor, or the system actor when blank."""
        if actor is not None and actor.strip():
            return actor.strip()
        return self._system_actor

    async def _write(
        self,
        entity_type: str,
        entity_id: int,
        entity_code: str | None,
        change_type: ChangeType,
        *,
        old_values: str | None,
        new_values: str | None,
        actor: str | None,
    ) -> AuditEntryResult:
        entry = AuditEntryCreate(
            entity_type=entity_type,
            entity_id=entity_id,
            entity_code=entity_code,
            change_type=change_type,
            changed_by=self.resolve_actor(actor),
            changed_at=utc_now(),
            old_values=old_values,
            new_values=new_values,
        )
        async with self._writer_scope() as writer:
            result = await writer.create(entry)
        logger.debug(
            "Audit %s recorded for %s %s (code=%s, by=%s)",
            change_type.value,
            entity_type,
            entity_id,
            entity_code,
            entry.changed_by,
        )
        return result

    @staticmethod
    def _serialize(snapshot: ValueSnapshot) -> str:
        """Render snapshot as JSON; fall back to plain text when that fails."""
        try:
            return snapshot.to_json()
        except (TypeError, ValueError):
            logger.error(
                "Failed to serialize audit snapshot to JSON; storing text fallback",
                exc_info=True,
            )
            return snapshot.to_text()
