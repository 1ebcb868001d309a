"""Health check endpoints: liveness and database readiness."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from codelists.core.config import get_settings
from codelists.domain.exceptions import SqlNotConfiguredException
from codelists.infrastructure.persistence.database import get_session_factory
from codelists.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=get_settings().app_version)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database not reachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 when the database answers SELECT 1; 503 otherwise."""
    try:
        session_factory = get_session_factory()
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except (SqlNotConfiguredException, SQLAlchemyError) as exc:
        message = exc.message if isinstance(exc, SqlNotConfiguredException) else str(exc)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=message).model_dump(),
        )
    return ReadinessResponse()
