"""In-process, fire-and-forget fan-out of codelist change notifications."""

from __future__ import annotations

import inspect

from codelists.application.dtos.notification import CodelistChangeEvent
from codelists.application.interfaces.services import ChangeSubscriber
from codelists.domain.enums import ChangeType
from codelists.shared.telemetry.logging import get_logger
from codelists.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class CodelistChangePublisher:
    """Delivers change events to registered callbacks (sync or async).

    A failing subscriber is logged and skipped; publishing never raises
    for subscriber errors.
    """

    def __init__(self) -> None:
        self._subscribers: list[ChangeSubscriber] = []

    def subscribe(self, callback: ChangeSubscriber) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ChangeSubscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    async def publish(self, event: CodelistChangeEvent) -> None:
        logger.debug(
            "Publishing %s change for %s %s",
            event.change_type.value,
            event.codelist_code,
            event.entity_id,
        )
        for callback in list(self._subscribers):
            try:
                outcome = callback(event)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.warning(
                    "Codelist change subscriber %r failed for %s %s",
                    callback,
                    event.codelist_code,
                    event.entity_id,
                    exc_info=True,
                )

    async def publish_change(
        self,
        codelist_name: str,
        codelist_code: str,
        change_type: ChangeType,
        entity_id: int,
        entity_code: str | None,
        entity_name: str | None,
        changed_by: str,
    ) -> None:
        """Build an event stamped with the current time and publish it."""
        await self.publish(
            CodelistChangeEvent(
                codelist_name=codelist_name,
                codelist_code=codelist_code,
                change_type=change_type,
                entity_id=entity_id,
                entity_code=entity_code,
                entity_name=entity_name,
                changed_by=changed_by,
                occurred_at=utc_now(),
            )
        )


def log_change_event(event: CodelistChangeEvent) -> None:
    """Default subscriber: one INFO line per codelist change."""
    logger.info(
        "Codelist %s (%s): %s of %s '%s' by %s",
        event.codelist_name,
        event.codelist_code,
        event.change_type.value,
        event.entity_code,
        event.entity_name,
        event.changed_by,
    )
