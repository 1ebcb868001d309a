"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from codelists.domain.entities.classification import ClassificationNode, build_forest
from codelists.domain.entities.voltage_level import VoltageLevel

__all__ = [
    "ClassificationNode",
    "VoltageLevel",
    "build_forest",
]
