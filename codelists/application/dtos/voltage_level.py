"""DTOs for voltage level mutations."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class VoltageLevelData:
    """Input for creating or fully updating a voltage level."""

    code: str
    name_cs: str
    name_en: str
    voltage_range_cs: str
    voltage_range_en: str
    valid_from: date | None = None
    valid_to: date | None = None
    sort_order: int | None = None
