"""Unit tests for AuditRecorder with an in-memory writer scope."""

import json
import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from codelists.application.dtos.audit_log import AuditEntryCreate, AuditEntryResult
from codelists.application.services.audit_recorder import AuditRecorder
from codelists.domain.enums import ChangeType
from codelists.domain.value_objects import ValueSnapshot


class _Writer:
    """Collects entries; each scope counts as one committed transaction."""

    def __init__(self) -> None:
        self.entries: list[AuditEntryCreate] = []
        self.scopes_opened = 0

    async def create(self, entry: AuditEntryCreate) -> AuditEntryResult:
        self.entries.append(entry)
        return AuditEntryResult(id=len(self.entries), **entry.__dict__)

    def scope(self):
        @asynccontextmanager
        async def _scope():
            self.scopes_opened += 1
            yield self

        return _scope()


@pytest.fixture
def writer() -> _Writer:
    return _Writer()


@pytest.fixture
def recorder(writer: _Writer) -> AuditRecorder:
    return AuditRecorder(writer.scope, system_actor="system")


async def test_log_create_has_only_new_values(recorder: AuditRecorder, writer: _Writer) -> None:
    result = await recorder.log_create(
        "VoltageLevel", 1, "NN", ValueSnapshot.of(code="NN", nameCs="Nízké napětí"), "alice"
    )

    assert result.id == 1
    [entry] = writer.entries
    assert entry.change_type is ChangeType.CREATE
    assert entry.old_values is None
    assert json.loads(entry.new_values) == {"code": "NN", "nameCs": "Nízké napětí"}
    assert entry.changed_by == "alice"
    assert entry.entity_code == "NN"
    assert entry.changed_at.tzinfo is not None
    assert entry.changed_at <= datetime.now(UTC)


async def test_log_create_with_empty_snapshot_stores_empty_object(
    recorder: AuditRecorder, writer: _Writer
) -> None:
    await recorder.log_create("VoltageLevel", 1, None, {})
    assert writer.entries[0].new_values == "{}"


async def test_log_update_with_equal_snapshots_writes_nothing(
    recorder: AuditRecorder, writer: _Writer
) -> None:
    before = ValueSnapshot.of([("code", "NN"), ("sortOrder", 1)])
    after = ValueSnapshot.of([("sortOrder", 1), ("code", "NN"), ("validTo", None)])

    result = await recorder.log_update("VoltageLevel", 1, "NN", before, after)

    assert result is None
    assert writer.entries == []
    assert writer.scopes_opened == 0


async def test_log_update_records_both_snapshots(recorder: AuditRecorder, writer: _Writer) -> None:
    await recorder.log_update(
        "VoltageLevel",
        1,
        "NN",
        {"code": "NN", "sortOrder": 1},
        {"code": "NN", "sortOrder": 2},
        actor="bob",
    )

    [entry] = writer.entries
    assert entry.change_type is ChangeType.UPDATE
    old, new = json.loads(entry.old_values), json.loads(entry.new_values)
    assert {k for k in old if old[k] != new.get(k)} == {"sortOrder"}


async def test_log_delete_has_only_old_values(recorder: AuditRecorder, writer: _Writer) -> None:
    await recorder.log_delete("BuildingClassification", 9, "801", {"code": "801", "level": 1})

    [entry] = writer.entries
    assert entry.change_type is ChangeType.DELETE
    assert entry.new_values is None
    assert json.loads(entry.old_values) == {"code": "801", "level": 1}


@pytest.mark.parametrize("actor", [None, "", "   "])
async def test_blank_actor_falls_back_to_system(
    recorder: AuditRecorder, writer: _Writer, actor: str | None
) -> None:
    await recorder.log_create("VoltageLevel", 1, "NN", {"code": "NN"}, actor)
    assert writer.entries[0].changed_by == "system"


async def test_actor_is_trimmed(recorder: AuditRecorder, writer: _Writer) -> None:
    await recorder.log_create("VoltageLevel", 1, "NN", {"code": "NN"}, "  carol ")
    assert writer.entries[0].changed_by == "carol"


async def test_serialization_failure_falls_back_to_text(
    recorder: AuditRecorder, writer: _Writer, caplog: pytest.LogCaptureFixture
) -> None:
    class Opaque:
        def __str__(self) -> str:
            return "opaque"

    with caplog.at_level(logging.ERROR):
        await recorder.log_create("VoltageLevel", 1, "NN", {"code": "NN", "blob": Opaque()})

    assert writer.entries[0].new_values == "{code=NN, blob=opaque}"
    assert any(r.levelno == logging.ERROR for r in caplog.records)


async def test_each_entry_uses_its_own_scope(recorder: AuditRecorder, writer: _Writer) -> None:
    await recorder.log_create("VoltageLevel", 1, "NN", {"code": "NN"})
    await recorder.log_delete("VoltageLevel", 1, "NN", {"code": "NN"})
    assert writer.scopes_opened == 2


async def test_storage_error_propagates() -> None:
    failing_writer = AsyncMock()
    failing_writer.create.side_effect = RuntimeError("audit store down")

    @asynccontextmanager
    async def scope():
        yield failing_writer

    recorder = AuditRecorder(scope)
    with pytest.raises(RuntimeError, match="audit store down"):
        await recorder.log_create("VoltageLevel", 1, "NN", {"code": "NN"})
