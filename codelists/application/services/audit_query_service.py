"""Read side of the audit log: filtered, paginated, newest first."""

from __future__ import annotations

from codelists.application.dtos.audit_log import AuditEntryResult, AuditLogFilter
from codelists.application.dtos.pagination import Page
from codelists.application.interfaces.repositories import IAuditLogRepository
from codelists.domain.enums import ChangeType


class AuditQueryService:
    """Queries audit entries. Ordering is always changed_at desc, then id desc."""

    def __init__(
        self,
        audit_repo: IAuditLogRepository,
        default_page_size: int = 25,
        max_page_size: int = 200,
    ) -> None:
        self.audit_repo = audit_repo
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def find_all(
        self, page: int = 0, page_size: int | None = None
    ) -> Page[AuditEntryResult]:
        return await self._page(AuditLogFilter(), page, page_size)

    async def find_with_filters(
        self,
        entity_type: str | None = None,
        change_type: ChangeType | str | None = None,
        changed_by: str | None = None,
        search: str | None = None,
        page: int = 0,
        page_size: int | None = None,
    ) -> Page[AuditEntryResult]:
        """Return entries matching every non-blank filter.

        entity_type, change_type and changed_by match exactly; search is a
        case-insensitive substring over entity_type, entity_code, changed_by,
        old_values and new_values. Unknown change types are ignored.
        """
        filters = AuditLogFilter.from_raw(
            entity_type=entity_type,
            change_type=change_type,
            changed_by=changed_by,
            search=search,
        )
        return await self._page(filters, page, page_size)

    async def search_fulltext(
        self, query: str | None, page: int = 0, page_size: int | None = None
    ) -> Page[AuditEntryResult]:
        """Substring search only; a blank query returns everything."""
        return await self._page(AuditLogFilter.from_raw(search=query), page, page_size)

    async def get_distinct_entity_types(self) -> list[str]:
        return await self.audit_repo.distinct_entity_types()

    async def get_distinct_changed_by(self) -> list[str]:
        return await self.audit_repo.distinct_changed_by()

    async def find_by_id(self, entry_id: int) -> AuditEntryResult | None:
        return await self.audit_repo.get_by_id(entry_id)

    def clamp_page_size(self, page_size: int | None) -> int:
        """Clamp requested size to 1..max_page_size (default when None)."""
        if page_size is None:
            page_size = self.default_page_size
        return max(1, min(page_size, self.max_page_size))

    async def _page(
        self, filters: AuditLogFilter, page: int, page_size: int | None
    ) -> Page[AuditEntryResult]:
        size = self.clamp_page_size(page_size)
        page = max(page, 0)
        items = await self.audit_repo.list(filters, skip=page * size, limit=size)
        total = await self.audit_repo.count(filters)
        return Page(items=items, total=total, page=page, page_size=size)
