"""Audit log API: read-only change history of codelist records (who changed what, when)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from codelists.api.v1.dependencies import get_audit_query_service
from codelists.application.dtos.audit_log import AuditEntryResult
from codelists.application.dtos.pagination import Page
from codelists.application.services import AuditQueryService
from codelists.schemas.audit_log import AuditLogEntryResponse, AuditLogPageResponse

router = APIRouter()


def _to_page_response(page: Page[AuditEntryResult]) -> AuditLogPageResponse:
    return AuditLogPageResponse(
        items=[AuditLogEntryResponse.model_validate(e) for e in page.items],
        total=page.total,
        page=page.page,
        page_size=page.page_size,
    )


@router.get("", response_model=AuditLogPageResponse)
async def list_audit_log(
    service: Annotated[AuditQueryService, Depends(get_audit_query_service)],
    entity_type: str | None = Query(None, description="Exact entity type"),
    change_type: str | None = Query(None, description="CREATE, UPDATE or DELETE"),
    changed_by: str | None = Query(None, description="Exact actor"),
    search: str | None = Query(None, description="Case-insensitive substring"),
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int | None = Query(None, ge=1, description="Page size (clamped)"),
    sort: str | None = Query(None, description="Accepted for compatibility; ignored"),
    direction: str | None = Query(None, description="Accepted for compatibility; ignored"),
):
    """List audit entries, newest first, with optional filters."""
    result = await service.find_with_filters(
        entity_type=entity_type,
        change_type=change_type,
        changed_by=changed_by,
        search=search,
        page=page,
        page_size=size,
    )
    return _to_page_response(result)


@router.get("/search", response_model=AuditLogPageResponse)
async def search_audit_log(
    service: Annotated[AuditQueryService, Depends(get_audit_query_service)],
    q: str | None = Query(None, description="Case-insensitive substring"),
    page: int = Query(0, ge=0),
    size: int | None = Query(None, ge=1),
):
    """Full-text style search over entity type, code, actor and value snapshots."""
    return _to_page_response(await service.search_fulltext(q, page=page, page_size=size))


@router.get("/entity-types", response_model=list[str])
async def list_entity_types(
    service: Annotated[AuditQueryService, Depends(get_audit_query_service)],
):
    return await service.get_distinct_entity_types()


@router.get("/changed-by", response_model=list[str])
async def list_changed_by(
    service: Annotated[AuditQueryService, Depends(get_audit_query_service)],
):
    return await service.get_distinct_changed_by()


@router.get("/{entry_id}", response_model=AuditLogEntryResponse)
async def get_audit_entry(
    entry_id: int,
    service: Annotated[AuditQueryService, Depends(get_audit_query_service)],
):
    entry = await service.find_by_id(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Audit log entry not found")
    return AuditLogEntryResponse.model_validate(entry)
