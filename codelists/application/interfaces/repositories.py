"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from codelists.application.dtos.audit_log import (
        AuditEntryCreate,
        AuditEntryResult,
        AuditLogFilter,
    )
    from codelists.application.dtos.classification import ClassificationNodeData
    from codelists.application.dtos.voltage_level import VoltageLevelData
    from codelists.domain.entities import ClassificationNode, VoltageLevel


# Audit log repository interfaces
class IAuditLogWriter(Protocol):
    """Append-only side of the audit log. No update/delete exists."""

    async def create(self, entry: AuditEntryCreate) -> AuditEntryResult:
        """Append one audit entry; return the persisted record with its id."""


class IAuditLogRepository(IAuditLogWriter, Protocol):
    """Protocol for the audit log repository (append + read)."""

    async def get_by_id(self, entry_id: int) -> AuditEntryResult | None:
        """Return entry by id, or None."""

    async def list(
        self,
        filters: AuditLogFilter,
        *,
        skip: int = 0,
        limit: int = 25,
    ) -> list[AuditEntryResult]:
        """Return matching entries, newest first (changed_at desc, id desc)."""

    async def count(self, filters: AuditLogFilter) -> int:
        """Return number of entries matching filters."""

    async def distinct_entity_types(self) -> list[str]:
        """Return distinct entity types, ascending."""

    async def distinct_changed_by(self) -> list[str]:
        """Return distinct actors, ascending."""


# Scope that yields a writer bound to its own, independently committed transaction.
AuditWriterScope: TypeAlias = Callable[[], AbstractAsyncContextManager[IAuditLogWriter]]


# Building classification repository interface
class IClassificationRepository(Protocol):
    """Protocol for building classification (KSO) persistence.

    Flat reads never populate children; all lists are ordered by code.
    """

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction that commits on exit and rolls back on error."""

    async def get_by_id(self, node_id: int) -> ClassificationNode | None:
        """Return node by id, or None."""

    async def get_by_code(self, code: str) -> ClassificationNode | None:
        """Return node by unique code, or None."""

    async def exists_by_code(self, code: str) -> bool:
        """Return whether a node with this code exists."""

    async def list_all(self) -> list[ClassificationNode]:
        """Return every node ordered by code."""

    async def list_roots(self) -> list[ClassificationNode]:
        """Return nodes without a parent."""

    async def list_by_parent(self, parent_id: int) -> list[ClassificationNode]:
        """Return direct children of parent_id."""

    async def list_by_level(self, level: int) -> list[ClassificationNode]:
        """Return nodes at the given level."""

    async def search(self, query: str) -> list[ClassificationNode]:
        """Case-insensitive substring match on code, name_cs and name_en."""

    async def has_children(self, node_id: int) -> bool:
        """Return whether at least one node has parent_id == node_id."""

    async def create(
        self, data: ClassificationNodeData, parent_id: int | None
    ) -> ClassificationNode:
        """Insert a node with the resolved parent; return it."""

    async def update(
        self, node_id: int, data: ClassificationNodeData, parent_id: int | None
    ) -> ClassificationNode:
        """Overwrite all fields of node_id; return the updated node."""

    async def delete(self, node_id: int) -> None:
        """Delete node_id. Raises HasChildrenException if the database still sees children."""


# Voltage level repository interface
class IVoltageLevelRepository(Protocol):
    """Protocol for voltage level persistence."""

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction that commits on exit and rolls back on error."""

    async def get_by_id(self, level_id: int) -> VoltageLevel | None:
        """Return voltage level by id, or None."""

    async def get_by_code(self, code: str) -> VoltageLevel | None:
        """Return voltage level by code, or None."""

    async def exists_by_code(self, code: str) -> bool:
        """Return whether a voltage level with this code exists."""

    async def list_all(self) -> list[VoltageLevel]:
        """Return all voltage levels ordered by sort_order, then code."""

    async def create(self, data: VoltageLevelData) -> VoltageLevel:
        """Insert a voltage level; return it."""

    async def update(self, level_id: int, data: VoltageLevelData) -> VoltageLevel:
        """Overwrite all fields; return the updated record."""

    async def delete(self, level_id: int) -> None:
        """Delete the voltage level."""
