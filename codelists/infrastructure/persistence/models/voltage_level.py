"""Voltage level ORM model (flat codelist)."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from codelists.infrastructure.persistence.database import Base
from codelists.infrastructure.persistence.models.mixins import CodelistModel


class VoltageLevelModel(CodelistModel, Base):
    """Voltage level by magnitude (NN, VN, VVN, ZVN)."""

    __tablename__ = "voltage_levels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    name_cs: Mapped[str] = mapped_column(String(200), nullable=False)
    name_en: Mapped[str] = mapped_column(String(200), nullable=False)
    voltage_range_cs: Mapped[str] = mapped_column(String(100), nullable=False)
    voltage_range_en: Mapped[str] = mapped_column(String(100), nullable=False)
