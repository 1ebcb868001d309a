"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from codelists.domain.entities import ClassificationNode, VoltageLevel
from codelists.domain.enums import ChangeType, ClassificationLevel
from codelists.domain.exceptions import (
    CodeAlreadyExistsException,
    CodelistException,
    HasChildrenException,
    HierarchyCycleException,
    ParentNotFoundException,
    ParentRequiredException,
    ResourceNotFoundException,
    StructuralViolationException,
    ValidationException,
)
from codelists.domain.value_objects import ValueSnapshot

__all__ = [
    # Entities
    "ClassificationNode",
    "VoltageLevel",
    # Enums
    "ChangeType",
    "ClassificationLevel",
    # Exceptions
    "CodeAlreadyExistsException",
    "CodelistException",
    "HasChildrenException",
    "HierarchyCycleException",
    "ParentNotFoundException",
    "ParentRequiredException",
    "ResourceNotFoundException",
    "StructuralViolationException",
    "ValidationException",
    # Value objects
    "ValueSnapshot",
]
