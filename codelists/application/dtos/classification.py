"""DTOs for building classification (KSO) mutations."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ClassificationNodeData:
    """Input for creating or fully updating a classification node.

    parent_id is ignored for level 1 and required for deeper levels.
    """

    code: str
    name_cs: str
    name_en: str
    level: int
    parent_id: int | None = None
    description_cs: str | None = None
    description_en: str | None = None
    valid_from: date | None = None
    valid_to: date | None = None
    sort_order: int | None = None
