"""Audit log filter predicates.

Turns an AuditLogFilter into SQLAlchemy boolean expressions. Exact filters
are ANDed; the search term becomes a single OR group over the text columns
and is ANDed with the rest. No SQL text is assembled by hand.
"""

from sqlalchemy import ColumnElement, String, func, or_

from codelists.application.dtos.audit_log import AuditLogFilter
from codelists.infrastructure.persistence.models.audit_log import AuditLog

SEARCH_COLUMNS = (
    AuditLog.entity_type,
    AuditLog.entity_code,
    AuditLog.changed_by,
    AuditLog.old_values,
    AuditLog.new_values,
)


def search_predicate(term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match of term against any search column."""
    needle = term.lower()
    return or_(
        *(
            func.lower(column, type_=String).contains(needle, autoescape=True)
            for column in SEARCH_COLUMNS
        )
    )


def build_audit_predicates(filters: AuditLogFilter) -> list[ColumnElement[bool]]:
    """Return predicates to AND together; empty list means no filtering."""
    conditions: list[ColumnElement[bool]] = []
    if filters.entity_type:
        conditions.append(AuditLog.entity_type == filters.entity_type)
    if filters.change_type is not None:
        conditions.append(AuditLog.change_type == filters.change_type.value)
    if filters.changed_by:
        conditions.append(AuditLog.changed_by == filters.changed_by)
    if filters.search:
        conditions.append(search_predicate(filters.search))
    return conditions
