"""Building classification (KSO) API schemas."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from codelists.application.dtos.classification import ClassificationNodeData


class BuildingClassificationRequest(BaseModel):
    """Request body for POST and PUT (full replace).

    parent_id is ignored for level 1 and required for levels 2 to 4.
    """

    code: str = Field(..., min_length=1, max_length=15)
    name_cs: str = Field(..., min_length=1, max_length=200)
    name_en: str = Field(..., min_length=1, max_length=200)
    description_cs: str | None = Field(default=None, max_length=4000)
    description_en: str | None = Field(default=None, max_length=4000)
    level: int = Field(..., ge=1, le=4)
    parent_id: int | None = None
    valid_from: date | None = None
    valid_to: date | None = None
    sort_order: int | None = None

    def to_data(self) -> ClassificationNodeData:
        return ClassificationNodeData(
            code=self.code.strip(),
            name_cs=self.name_cs,
            name_en=self.name_en,
            level=self.level,
            parent_id=self.parent_id,
            description_cs=self.description_cs,
            description_en=self.description_en,
            valid_from=self.valid_from,
            valid_to=self.valid_to,
            sort_order=self.sort_order,
        )


class BuildingClassificationResponse(BaseModel):
    """Flat node (no children) with the parent's code and Czech name."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name_cs: str
    name_en: str
    description_cs: str | None = None
    description_en: str | None = None
    level: int
    parent_id: int | None = None
    parent_code: str | None = None
    parent_name: str | None = None
    valid_from: date | None = None
    valid_to: date | None = None
    sort_order: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BuildingClassificationTreeResponse(BuildingClassificationResponse):
    """Node with its complete subtree, ordered by code."""

    children: list[BuildingClassificationTreeResponse] = Field(default_factory=list)
