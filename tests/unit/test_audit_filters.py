"""Tests for the audit log predicate builder (compiled against SQLite)."""

from sqlalchemy import and_, select
from sqlalchemy.dialects import sqlite

from codelists.application.dtos.audit_log import AuditLogFilter
from codelists.domain.enums import ChangeType
from codelists.infrastructure.persistence.filters import build_audit_predicates
from codelists.infrastructure.persistence.models.audit_log import AuditLog


def _sql(filters: AuditLogFilter) -> str:
    stmt = select(AuditLog.id).where(*build_audit_predicates(filters))
    return str(stmt.compile(dialect=sqlite.dialect()))


def test_no_filters_means_no_predicates() -> None:
    assert build_audit_predicates(AuditLogFilter()) == []
    assert "WHERE" not in _sql(AuditLogFilter())


def test_exact_filters_are_anded() -> None:
    filters = AuditLogFilter(
        entity_type="VoltageLevel", change_type=ChangeType.UPDATE, changed_by="alice"
    )
    predicates = build_audit_predicates(filters)
    assert len(predicates) == 3
    sql = str(and_(*predicates).compile(dialect=sqlite.dialect()))
    assert "audit_log.entity_type = ?" in sql
    assert "audit_log.change_type = ?" in sql
    assert "audit_log.changed_by = ?" in sql
    assert sql.count(" AND ") == 2


def test_search_is_one_or_group_over_text_columns() -> None:
    [predicate] = build_audit_predicates(AuditLogFilter(search="NN"))
    sql = str(predicate.compile(dialect=sqlite.dialect()))
    for column in ("entity_type", "entity_code", "changed_by", "old_values", "new_values"):
        assert f"lower(audit_log.{column}) LIKE" in sql
    assert sql.count(" OR ") == 4
    assert "ESCAPE" in sql


def test_search_is_anded_with_exact_filters() -> None:
    sql = _sql(AuditLogFilter(entity_type="VoltageLevel", search="NN"))
    where = sql.split("WHERE", 1)[1]
    assert where.strip().startswith("audit_log.entity_type = ?")
    assert " AND (" in where


def test_search_term_is_lowercased() -> None:
    [predicate] = build_audit_predicates(AuditLogFilter(search="NN"))
    params = predicate.compile(dialect=sqlite.dialect()).params
    assert set(params.values()) == {"nn"}


def test_from_raw_normalizes_blank_and_unknown_values() -> None:
    filters = AuditLogFilter.from_raw(
        entity_type="  ", change_type="bogus", changed_by="", search=None
    )
    assert filters == AuditLogFilter()
    assert AuditLogFilter.from_raw(change_type="delete").change_type is ChangeType.DELETE
