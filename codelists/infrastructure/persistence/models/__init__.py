"""Persistence models: ORM entities and mixins."""

from codelists.infrastructure.persistence.models.audit_log import AuditLog
from codelists.infrastructure.persistence.models.classification import (
    BuildingClassification,
)
from codelists.infrastructure.persistence.models.mixins import (
    CodelistModel,
    TimestampMixin,
    ValidityMixin,
)
from codelists.infrastructure.persistence.models.voltage_level import VoltageLevelModel

__all__ = [
    "AuditLog",
    "BuildingClassification",
    "CodelistModel",
    "TimestampMixin",
    "ValidityMixin",
    "VoltageLevelModel",
]
