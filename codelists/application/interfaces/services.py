"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

if TYPE_CHECKING:
    from codelists.application.dtos.audit_log import AuditEntryResult
    from codelists.application.dtos.notification import CodelistChangeEvent
    from codelists.domain.enums import ChangeType
    from codelists.domain.value_objects import ValueSnapshot

    SnapshotInput = ValueSnapshot | Mapping[str, Any]


# Audit recorder interface
class IAuditRecorder(Protocol):
    """Protocol for appending audit entries after a successful mutation."""

    def resolve_actor(self, actor: str | None) -> str:
        """Return the trimmed actor, or the system actor when blank."""

    async def log_create(
        self,
        entity_type: str,
        entity_id: int,
        entity_code: str | None,
        new_values: SnapshotInput,
        actor: str | None = None,
    ) -> AuditEntryResult:
        """Append a CREATE entry (old_values omitted)."""

    async def log_update(
        self,
        entity_type: str,
        entity_id: int,
        entity_code: str | None,
        old_values: SnapshotInput,
        new_values: SnapshotInput,
        actor: str | None = None,
    ) -> AuditEntryResult | None:
        """Append an UPDATE entry, or return None when nothing changed."""

    async def log_delete(
        self,
        entity_type: str,
        entity_id: int,
        entity_code: str | None,
        old_values: SnapshotInput,
        actor: str | None = None,
    ) -> AuditEntryResult:
        """Append a DELETE entry (new_values omitted)."""


# Change notification interface
class IChangePublisher(Protocol):
    """Protocol for fire-and-forget codelist change notifications."""

    async def publish(self, event: CodelistChangeEvent) -> None:
        """Deliver event to subscribers; never raises for subscriber failures."""

    async def publish_change(
        self,
        codelist_name: str,
        codelist_code: str,
        change_type: ChangeType,
        entity_id: int,
        entity_code: str | None,
        entity_name: str | None,
        changed_by: str,
    ) -> None:
        """Build a CodelistChangeEvent stamped with the current time and publish it."""


# Subscriber callback: sync or async, receives the event.
ChangeSubscriber: TypeAlias = Callable[["CodelistChangeEvent"], Awaitable[None] | None]
