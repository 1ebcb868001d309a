"""Application services: audit recording and queries, hierarchy rules, change notifications."""

from codelists.application.services.audit_query_service import AuditQueryService
from codelists.application.services.audit_recorder import AuditRecorder
from codelists.application.services.change_publisher import CodelistChangePublisher
from codelists.application.services.hierarchy_manager import HierarchyManager

__all__ = [
    "AuditQueryService",
    "AuditRecorder",
    "CodelistChangePublisher",
    "HierarchyManager",
]
