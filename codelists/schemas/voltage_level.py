"""Voltage level API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from codelists.application.dtos.voltage_level import VoltageLevelData


class VoltageLevelRequest(BaseModel):
    """Request body for POST and PUT (full replace)."""

    code: str = Field(..., min_length=1, max_length=10)
    name_cs: str = Field(..., min_length=1, max_length=200)
    name_en: str = Field(..., min_length=1, max_length=200)
    voltage_range_cs: str = Field(..., min_length=1, max_length=100)
    voltage_range_en: str = Field(..., min_length=1, max_length=100)
    valid_from: date | None = None
    valid_to: date | None = None
    sort_order: int | None = None

    def to_data(self) -> VoltageLevelData:
        return VoltageLevelData(
            code=self.code.strip(),
            name_cs=self.name_cs,
            name_en=self.name_en,
            voltage_range_cs=self.voltage_range_cs,
            voltage_range_en=self.voltage_range_en,
            valid_from=self.valid_from,
            valid_to=self.valid_to,
            sort_order=self.sort_order,
        )


class VoltageLevelResponse(BaseModel):
    """Voltage level (read)."""

    model_config = ConfigDict(from_attributes=True)

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
