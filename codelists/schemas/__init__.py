"""Pydantic request/response schemas for the API."""

from codelists.schemas.audit_log import AuditLogEntryResponse, AuditLogPageResponse
from codelists.schemas.building_classification import (
    BuildingClassificationRequest,
    BuildingClassificationResponse,
    BuildingClassificationTreeResponse,
)
from codelists.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from codelists.schemas.voltage_level import VoltageLevelRequest, VoltageLevelResponse

__all__ = [
    "AuditLogEntryResponse",
    "AuditLogPageResponse",
    "BuildingClassificationRequest",
    "BuildingClassificationResponse",
    "BuildingClassificationTreeResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "VoltageLevelRequest",
    "VoltageLevelResponse",
]
