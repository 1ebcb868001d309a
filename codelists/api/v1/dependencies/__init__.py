"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the request actor and
application services. Routes depend only on these, not on infra directly.
"""

from codelists.api.v1.dependencies.audit import (
    get_audit_log_repo,
    get_audit_query_service,
    get_audit_recorder,
)
from codelists.api.v1.dependencies.codelists import (
    get_building_classification_service,
    get_change_publisher,
    get_classification_repo,
    get_voltage_level_service,
)
from codelists.api.v1.dependencies.db import get_actor, get_db

__all__ = [
    "get_actor",
    "get_audit_log_repo",
    "get_audit_query_service",
    "get_audit_recorder",
    "get_building_classification_service",
    "get_change_publisher",
    "get_classification_repo",
    "get_db",
    "get_voltage_level_service",
]
