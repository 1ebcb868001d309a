"""DTOs for the codelist audit log (append-only change history)."""

from dataclasses import dataclass
from datetime import datetime

from codelists.domain.enums import ChangeType


@dataclass(frozen=True)
class AuditEntryCreate:
    """Input for appending one audit entry. Snapshots are already serialized."""

    entity_type: str
    entity_id: int
    entity_code: str | None
    change_type: ChangeType
    changed_by: str
    changed_at: datetime
    old_values: str | None
    new_values: str | None


@dataclass(frozen=True)
class AuditEntryResult:
    """Single audit entry (read-model for list/get)."""

    id: int
    entity_type: str
    entity_id: int
    entity_code: str | None
    change_type: ChangeType
    changed_by: str
    changed_at: datetime
    old_values: str | None
    new_values: str | None


@dataclass(frozen=True)
class AuditLogFilter:
    """Optional audit log filters. None or blank values are ignored.

    entity_type, change_type and changed_by are exact matches combined with AND;
    search is a case-insensitive substring matched against entity_type,
    entity_code, changed_by and both value blobs (OR), ANDed with the rest.
    """

    entity_type: str | None = None
    change_type: ChangeType | None = None
    changed_by: str | None = None
    search: str | None = None

    @classmethod
    def from_raw(
        cls,
        entity_type: str | None = None,
        change_type: ChangeType | str | None = None,
        changed_by: str | None = None,
        search: str | None = None,
    ) -> "AuditLogFilter":
        """Normalize raw query input: blank strings become None, unknown change types are dropped."""
        if not isinstance(change_type, ChangeType):
            change_type = ChangeType.parse(change_type)
        return cls(
            entity_type=_blank_to_none(entity_type),
            change_type=change_type,
            changed_by=_blank_to_none(changed_by),
            search=_blank_to_none(search),
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
