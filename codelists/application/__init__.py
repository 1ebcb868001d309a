"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, audit writer scope).
"""

from codelists.application.interfaces import (
    IAuditLogRepository,
    IAuditLogWriter,
    IAuditRecorder,
    IChangePublisher,
    IClassificationRepository,
    IVoltageLevelRepository,
)
from codelists.application.services import (
    AuditQueryService,
    AuditRecorder,
    CodelistChangePublisher,
    HierarchyManager,
)
from codelists.application.use_cases import (
    BuildingClassificationService,
    VoltageLevelService,
)

__all__ = [
    "AuditQueryService",
    "AuditRecorder",
    "BuildingClassificationService",
    "CodelistChangePublisher",
    "HierarchyManager",
    "IAuditLogRepository",
    "IAuditLogWriter",
    "IAuditRecorder",
    "IChangePublisher",
    "IClassificationRepository",
    "IVoltageLevelRepository",
    "VoltageLevelService",
]
