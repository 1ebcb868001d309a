"""Tests for domain entities (classification forest, voltage level) and enums."""

from datetime import date

from codelists.domain.entities import ClassificationNode, VoltageLevel
from codelists.domain.entities.classification import build_forest
from codelists.domain.enums import ChangeType, ClassificationLevel


def _node(node_id: int, code: str, level: int, parent_id: int | None = None) -> ClassificationNode:
    return ClassificationNode(
        id=node_id,
        code=code,
        name_cs=f"CS {code}",
        name_en=f"EN {code}",
        level=level,
        parent_id=parent_id,
    )


def _sample() -> list[ClassificationNode]:
    # Already sorted by code, as the repository returns them.
    return [
        _node(1, "801", 1),
        _node(2, "801.1", 2, 1),
        _node(4, "801.11", 3, 2),
        _node(5, "801.11.1", 4, 4),
        _node(3, "801.2", 2, 1),
        _node(6, "802", 1),
    ]


class TestBuildForest:
    def test_roots_with_nested_children_in_code_order(self) -> None:
        roots = build_forest(_sample())
        assert [r.code for r in roots] == ["801", "802"]
        assert [c.code for c in roots[0].children] == ["801.1", "801.2"]
        assert [n.code for n in roots[0].walk()] == [
            "801",
            "801.1",
            "801.11",
            "801.11.1",
            "801.2",
        ]
        assert roots[1].children == []

    def test_every_node_appears_exactly_once(self) -> None:
        roots = build_forest(_sample())
        codes = [n.code for root in roots for n in root.walk()]
        assert sorted(codes) == sorted(n.code for n in _sample())

    def test_subtree_for_root_id(self) -> None:
        [subtree] = build_forest(_sample(), root_id=2)
        assert subtree.code == "801.1"
        assert [n.code for n in subtree.walk()] == ["801.1", "801.11", "801.11.1"]

    def test_missing_root_id_returns_empty(self) -> None:
        assert build_forest(_sample(), root_id=999) == []

    def test_input_nodes_are_not_mutated(self) -> None:
        nodes = _sample()
        build_forest(nodes)
        assert all(n.children == [] for n in nodes)

    def test_corrupt_cycle_does_not_loop(self) -> None:
        nodes = [_node(1, "A", 2, 2), _node(2, "B", 2, 1)]
        [a] = build_forest(nodes, root_id=1)
        assert [n.code for n in a.walk()] == ["A", "B"]


class TestClassificationNode:
    def test_snapshot_uses_camel_case_and_drops_none(self) -> None:
        node = _node(2, "801.1", 2, 1)
        snapshot = node.to_snapshot()
        assert snapshot.as_dict() == {
            "code": "801.1",
            "nameCs": "CS 801.1",
            "nameEn": "EN 801.1",
            "level": 2,
            "parentId": 1,
        }


class TestVoltageLevel:
    def test_validity_window_with_open_ends(self) -> None:
        level = VoltageLevel(
            id=1,
            code="NN",
            name_cs="Nízké napětí",
            name_en="Low voltage",
            voltage_range_cs="do 1 kV",
            voltage_range_en="up to 1 kV",
            valid_from=date(2024, 1, 1),
        )
        assert level.is_valid_on(date(2024, 1, 1))
        assert level.is_valid_on(date(2099, 1, 1))
        assert not level.is_valid_on(date(2023, 12, 31))
        level.valid_to = date(2024, 6, 30)
        assert not level.is_valid_on(date(2024, 7, 1))


class TestEnums:
    def test_change_type_parse(self) -> None:
        assert ChangeType.parse("update") is ChangeType.UPDATE
        assert ChangeType.parse(" DELETE ") is ChangeType.DELETE
        assert ChangeType.parse("") is None
        assert ChangeType.parse(None) is None
        assert ChangeType.parse("MERGE") is None

    def test_classification_level_bounds(self) -> None:
        assert ClassificationLevel.is_valid(1)
        assert ClassificationLevel.is_valid(4)
        assert not ClassificationLevel.is_valid(0)
        assert not ClassificationLevel.is_valid(5)
        assert not ClassificationLevel.is_valid(None)
