"""Application DTOs (no ORM dependency)."""

from codelists.application.dtos.audit_log import (
    AuditEntryCreate,
    AuditEntryResult,
    AuditLogFilter,
)
from codelists.application.dtos.classification import ClassificationNodeData
from codelists.application.dtos.notification import CodelistChangeEvent
from codelists.application.dtos.pagination import Page
from codelists.application.dtos.voltage_level import VoltageLevelData

__all__ = [
    "AuditEntryCreate",
    "AuditEntryResult",
    "AuditLogFilter",
    "ClassificationNodeData",
    "CodelistChangeEvent",
    "Page",
    "VoltageLevelData",
]
