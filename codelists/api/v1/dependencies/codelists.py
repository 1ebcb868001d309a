"""Codelist service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from codelists.api.v1.dependencies.audit import get_audit_recorder
from codelists.application.services import (
    AuditRecorder,
    CodelistChangePublisher,
    HierarchyManager,
)
from codelists.application.use_cases import (
    BuildingClassificationService,
    VoltageLevelService,
)
from codelists.infrastructure.persistence.database import get_db
from codelists.infrastructure.persistence.repositories import (
    BuildingClassificationRepository,
    VoltageLevelRepository,
)


def get_change_publisher(request: Request) -> CodelistChangePublisher:
    """Process-wide publisher created in create_app()."""
    return request.app.state.change_publisher


async def get_classification_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BuildingClassificationRepository:
    return BuildingClassificationRepository(db)


async def get_building_classification_service(
    repo: Annotated[BuildingClassificationRepository, Depends(get_classification_repo)],
    recorder: Annotated[AuditRecorder, Depends(get_audit_recorder)],
    publisher: Annotated[CodelistChangePublisher, Depends(get_change_publisher)],
) -> BuildingClassificationService:
    """Build BuildingClassificationService (request session + own audit sessions)."""
    return BuildingClassificationService(
        repo=repo,
        hierarchy=HierarchyManager(repo),
        recorder=recorder,
        publisher=publisher,
    )


async def get_voltage_level_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    recorder: Annotated[AuditRecorder, Depends(get_audit_recorder)],
    publisher: Annotated[CodelistChangePublisher, Depends(get_change_publisher)],
) -> VoltageLevelService:
    return VoltageLevelService(
        repo=VoltageLevelRepository(db),
        recorder=recorder,
        publisher=publisher,
    )
