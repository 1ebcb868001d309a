"""Request/response schemas for audit log API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from codelists.domain.enums import ChangeType


class AuditLogEntryResponse(BaseModel):
    """Single audit log entry (read). Value columns are the stored snapshot text."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    entity_type: str
    entity_id: int
    entity_code: str | None
    change_type: ChangeType
    changed_by: str
    changed_at: datetime
    old_values: str | None = None
    new_values: str | None = None


class AuditLogPageResponse(BaseModel):
    """Paginated list of audit log entries (page is zero-based)."""

    items: list[AuditLogEntryResponse]
    total: int
    page: int
    page_size: int
