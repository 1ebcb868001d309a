"""Audit log dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codelists.application.services import AuditQueryService, AuditRecorder
from codelists.core.config import get_settings
from codelists.infrastructure.persistence.database import get_db, get_session_factory
from codelists.infrastructure.persistence.repositories import (
    AuditLogRepository,
    make_audit_writer_scope,
)


async def get_audit_log_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AuditLogRepository:
    """Audit log repository for reads. Writes go through the audit recorder."""
    return AuditLogRepository(db)


async def get_audit_query_service(
    audit_repo: Annotated[AuditLogRepository, Depends(get_audit_log_repo)],
) -> AuditQueryService:
    settings = get_settings()
    return AuditQueryService(
        audit_repo,
        default_page_size=settings.audit_default_page_size,
        max_page_size=settings.audit_max_page_size,
    )


def get_audit_recorder() -> AuditRecorder:
    """Recorder writing each entry in its own session from the shared factory."""
    return AuditRecorder(
        make_audit_writer_scope(get_session_factory()),
        system_actor=get_settings().audit_system_actor,
    )
