"""Unit tests for HierarchyManager (parent resolution, cycle check, deletion guard)."""

import logging
from unittest.mock import AsyncMock

import pytest

from codelists.application.services.hierarchy_manager import HierarchyManager
from codelists.domain.entities import ClassificationNode
from codelists.domain.exceptions import (
    HasChildrenException,
    HierarchyCycleException,
    ParentNotFoundException,
    ParentRequiredException,
    ValidationException,
)


def _node(node_id: int, code: str, level: int, parent_id: int | None = None) -> ClassificationNode:
    return ClassificationNode(
        id=node_id, code=code, name_cs=code, name_en=code, level=level, parent_id=parent_id
    )


NODES = {
    1: _node(1, "801", 1),
    2: _node(2, "801.1", 2, 1),
    3: _node(3, "801.11", 3, 2),
    4: _node(4, "801.11.1", 4, 3),
    5: _node(5, "802", 1),
}


@pytest.fixture
def repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_id.side_effect = lambda node_id: NODES.get(node_id)
    repo.list_all.return_value = list(NODES.values())
    return repo


@pytest.fixture
def manager(repo: AsyncMock) -> HierarchyManager:
    return HierarchyManager(repo)


async def test_level_one_clears_parent(manager: HierarchyManager, repo: AsyncMock) -> None:
    assert await manager.validate_and_resolve_parent(1, 3) is None
    repo.get_by_id.assert_not_called()


async def test_resolves_existing_parent(manager: HierarchyManager) -> None:
    parent = await manager.validate_and_resolve_parent(2, 1)
    assert parent is not None
    assert parent.code == "801"


async def test_missing_parent_id_below_level_one(manager: HierarchyManager) -> None:
    with pytest.raises(ParentRequiredException):
        await manager.validate_and_resolve_parent(2, None)


async def test_unknown_parent(manager: HierarchyManager) -> None:
    with pytest.raises(ParentNotFoundException) as exc_info:
        await manager.validate_and_resolve_parent(2, 999)
    assert exc_info.value.parent_id == 999


@pytest.mark.parametrize("level", [0, 5, -1])
async def test_invalid_level(manager: HierarchyManager, level: int) -> None:
    with pytest.raises(ValidationException):
        await manager.validate_and_resolve_parent(level, 1)


async def test_parent_level_mismatch_is_accepted_with_warning(
    manager: HierarchyManager, caplog: pytest.LogCaptureFixture
) -> None:
    """Parent level is not enforced: a level-2 node under a level-3 parent is accepted."""
    with caplog.at_level(logging.WARNING):
        parent = await manager.validate_and_resolve_parent(2, 3)
    assert parent is not None
    assert parent.level == 3
    assert any("level 3" in r.getMessage() for r in caplog.records)


async def test_reparent_under_own_descendant_is_rejected(manager: HierarchyManager) -> None:
    with pytest.raises(HierarchyCycleException):
        await manager.validate_and_resolve_parent(4, 3, node_id=1)


async def test_reparent_under_itself_is_rejected(manager: HierarchyManager) -> None:
    with pytest.raises(HierarchyCycleException):
        await manager.validate_and_resolve_parent(2, 2, node_id=2)


async def test_reparent_to_other_branch_is_allowed(manager: HierarchyManager) -> None:
    parent = await manager.validate_and_resolve_parent(2, 5, node_id=2)
    assert parent is not None
    assert parent.id == 5


async def test_possible_parents(manager: HierarchyManager, repo: AsyncMock) -> None:
    repo.list_by_level.return_value = [NODES[2]]
    assert await manager.get_possible_parents(3) == [NODES[2]]
    repo.list_by_level.assert_awaited_once_with(2)


@pytest.mark.parametrize("level", [None, 0, 1])
async def test_possible_parents_for_top_level_is_empty(
    manager: HierarchyManager, repo: AsyncMock, level: int | None
) -> None:
    assert await manager.get_possible_parents(level) == []
    repo.list_by_level.assert_not_called()


async def test_find_tree_and_subtree(manager: HierarchyManager) -> None:
    roots = await manager.find_tree()
    assert [r.code for r in roots] == ["801", "802"]
    subtree = await manager.find_entity_with_children(2)
    assert subtree is not None
    assert [n.code for n in subtree.walk()] == ["801.1", "801.11", "801.11.1"]
    assert await manager.find_entity_with_children(404) is None


async def test_blank_search_returns_nothing(manager: HierarchyManager, repo: AsyncMock) -> None:
    assert await manager.search("   ") == []
    assert await manager.search(None) == []
    repo.search.assert_not_called()


async def test_search_trims_query(manager: HierarchyManager, repo: AsyncMock) -> None:
    repo.search.return_value = []
    await manager.search("  nemoc ")
    repo.search.assert_awaited_once_with("nemoc")


async def test_guard_deletion(manager: HierarchyManager, repo: AsyncMock) -> None:
    repo.has_children.return_value = True
    with pytest.raises(HasChildrenException):
        await manager.guard_deletion(1)

    repo.has_children.return_value = False
    await manager.guard_deletion(4)
