"""Codelist change notification payload (in-process pub/sub)."""

from dataclasses import dataclass
from datetime import datetime

from codelists.domain.enums import ChangeType


@dataclass(frozen=True)
class CodelistChangeEvent:
    """Announced to subscribers after a codelist record was created, updated or deleted."""

    codelist_name: str
    codelist_code: str
    change_type: ChangeType
    entity_id: int
    entity_code: str | None
    entity_name: str | None
    changed_by: str
    occurred_at: datetime
