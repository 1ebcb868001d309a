"""Voltage level domain entity (flat codelist "Rozdělení napětí dle velikosti")."""

from dataclasses import dataclass
from datetime import date, datetime

from codelists.domain.value_objects import ValueSnapshot


@dataclass
class VoltageLevel:
    """One voltage level record (e.g. NN - Nízké napětí)."""

    id: int
    code: str
    name_cs: str
    name_en: str
    voltage_range_cs: str
    voltage_range_en: str
    valid_from: date | None = None
    valid_to: date | None = None
    sort_order: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_valid_on(self, day: date) -> bool:
        """Return whether day falls inside [valid_from, valid_to]; open ends allowed."""
        after_start = self.valid_from is None or day >= self.valid_from
        before_end = self.valid_to is None or day <= self.valid_to
        return after_start and before_end

    def to_snapshot(self) -> ValueSnapshot:
        return ValueSnapshot.of(
            [
                ("code", self.code),
                ("nameCs", self.name_cs),
                ("nameEn", self.name_en),
                ("voltageRangeCs", self.voltage_range_cs),
                ("voltageRangeEn", self.voltage_range_en),
                ("validFrom", self.valid_from),
                ("validTo", self.valid_to),
                ("sortOrder", self.sort_order),
            ]
        )
