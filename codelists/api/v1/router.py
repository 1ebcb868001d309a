"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from codelists.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from codelists.api.v1.endpoints import (
    audit_log,
    building_classifications,
    health,
    voltage_levels,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(audit_log.router, prefix="/audit-log", tags=["audit-log"])
api_router.include_router(
    building_classifications.router,
    prefix="/building-classifications",
    tags=["building-classifications"],
)
api_router.include_router(
    voltage_levels.router, prefix="/voltage-levels", tags=["voltage-levels"]
)
