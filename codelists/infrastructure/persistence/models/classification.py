"""Building classification (KSO) ORM model. Self-referencing four-level tree."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from codelists.infrastructure.persistence.database import Base
from codelists.infrastructure.persistence.models.mixins import CodelistModel


class BuildingClassification(CodelistModel, Base):
    """One node of the KSO tree. parent_id uses ON DELETE RESTRICT: no cascades."""

    __tablename__ = "building_classifications"
    __table_args__ = (
        CheckConstraint("level BETWEEN 1 AND 4", name="ck_building_classifications_level"),
        Index("idx_building_classifications_parent_id", "parent_id"),
        Index("idx_building_classifications_level", "level"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(15), nullable=False, unique=True)
    name_cs: Mapped[str] = mapped_column(String(200), nullable=False)
    name_en: Mapped[str] = mapped_column(String(200), nullable=False)
    description_cs: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("building_classifications.id", ondelete="RESTRICT"),
        nullable=True,
    )
