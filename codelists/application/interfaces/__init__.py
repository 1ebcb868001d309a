"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from codelists.infrastructure or codelists.api.
"""

from codelists.application.interfaces.repositories import (
    AuditWriterScope,
    IAuditLogRepository,
    IAuditLogWriter,
    IClassificationRepository,
    IVoltageLevelRepository,
)
from codelists.application.interfaces.services import (
    ChangeSubscriber,
    IAuditRecorder,
    IChangePublisher,
)

__all__ = [
    "AuditWriterScope",
    "ChangeSubscriber",
    "IAuditLogRepository",
    "IAuditLogWriter",
    "IAuditRecorder",
    "IChangePublisher",
    "IClassificationRepository",
    "IVoltageLevelRepository",
]
