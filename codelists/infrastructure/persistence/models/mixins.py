"""SQLAlchemy mixins shared by codelist models.

Provides: TimestampMixin (created_at/updated_at) and ValidityMixin
(valid_from/valid_to/sort_order) for every published codelist.
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class ValidityMixin:
    """Mixin for the validity window and display order of a codelist record."""

    @declared_attr
    def valid_from(cls) -> Mapped[date | None]:
        return mapped_column(Date, nullable=True)

    @declared_attr
    def valid_to(cls) -> Mapped[date | None]:
        return mapped_column(Date, nullable=True)

    @declared_attr
    def sort_order(cls) -> Mapped[int | None]:
        return mapped_column(Integer, nullable=True)


class CodelistModel(TimestampMixin, ValidityMixin):
    """Combined mixin: timestamps + validity window. Common for codelist tables."""

    __abstract__ = True
