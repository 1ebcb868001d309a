"""Application use cases: one service per published codelist."""

from codelists.application.use_cases.building_classifications import (
    BuildingClassificationService,
)
from codelists.application.use_cases.voltage_levels import VoltageLevelService

__all__ = [
    "BuildingClassificationService",
    "VoltageLevelService",
]
