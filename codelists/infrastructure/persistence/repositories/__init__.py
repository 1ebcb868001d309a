"""Persistence repositories. Re-exports for dependency injection."""

from codelists.infrastructure.persistence.repositories.audit_log_repo import (
    AuditLogRepository,
    make_audit_writer_scope,
)
from codelists.infrastructure.persistence.repositories.base import BaseRepository
from codelists.infrastructure.persistence.repositories.classification_repo import (
    BuildingClassificationRepository,
)
from codelists.infrastructure.persistence.repositories.voltage_level_repo import (
    VoltageLevelRepository,
)

__all__ = [
    "AuditLogRepository",
    "BaseRepository",
    "BuildingClassificationRepository",
    "VoltageLevelRepository",
    "make_audit_writer_scope",
]
