"""Base repository: session handling, transactions and primary-key lookup."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from codelists.domain.exceptions import (
    CodeAlreadyExistsException,
    ResourceNotFoundException,
)
from codelists.infrastructure.persistence.database import Base
from codelists.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when exc was raised by a UNIQUE constraint (Postgres or SQLite)."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    message = str(orig)
    return "UNIQUE constraint failed" in message or "unique constraint" in message


class BaseRepository(Generic[ModelType]):
    """Base repository with row lookup and an explicit commit boundary.

    Subclasses map rows to domain entities; ORM objects never leave the
    repository. A unique-code violation raised on flush (a concurrent
    writer took the code after the existence check) surfaces as
    CodeAlreadyExistsException for entity_type.
    """

    entity_type: str = ""

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Commit on normal exit, roll back and re-raise on error."""
        try:
            yield
        except BaseException:
            await self.db.rollback()
            raise
        await self.db.commit()

    async def _get_row(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _require_row(self, entity_id: int) -> ModelType:
        row = await self._get_row(entity_id)
        if row is None:
            raise ResourceNotFoundException(self.model.__name__, entity_id)
        return row

    async def _exists(self, *conditions: Any) -> bool:
        model: Any = self.model
        result = await self.db.execute(select(model.id).where(*conditions).limit(1))
        return result.first() is not None

    async def _flush(self, row: ModelType) -> None:
        try:
            await self.db.flush()
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            code = getattr(row, "code", None)
            logger.info(
                "Write of %s refused by unique constraint: %s", self.entity_type, exc.orig
            )
            raise CodeAlreadyExistsException(self.entity_type, code) from exc

    async def _insert(self, row: ModelType) -> ModelType:
        self.db.add(row)
        await self._flush(row)
        await self.db.refresh(row)
        return row

    async def _save(self, row: ModelType) -> ModelType:
        await self._flush(row)
        await self.db.refresh(row)
        return row
