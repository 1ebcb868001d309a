"""Tests for ValueSnapshot (ordering, None dropping, equality, serialization)."""

from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from codelists.domain.enums import ChangeType
from codelists.domain.value_objects import ValueSnapshot


class TestConstruction:
    def test_drops_none_and_keeps_insertion_order(self) -> None:
        snap = ValueSnapshot.of([("code", "NN"), ("nameEn", None), ("sortOrder", 1)])
        assert snap.keys() == ["code", "sortOrder"]
        assert len(snap) == 2

    def test_keyword_fields_and_mapping(self) -> None:
        snap = ValueSnapshot.of({"code": "NN"}, nameCs="Nízké napětí", validTo=None)
        assert snap.as_dict() == {"code": "NN", "nameCs": "Nízké napětí"}

    def test_keys_are_coerced_to_str(self) -> None:
        snap = ValueSnapshot.of({1: "a"})
        assert snap.keys() == ["1"]

    def test_empty_snapshot_is_falsy(self) -> None:
        assert not ValueSnapshot.of()
        assert not ValueSnapshot.of({"x": None})

    def test_getitem_and_contains(self) -> None:
        snap = ValueSnapshot.of(code="NN")
        assert snap["code"] == "NN"
        assert "code" in snap
        assert "nameCs" not in snap
        with pytest.raises(KeyError):
            snap["nameCs"]


class TestEquality:
    def test_equal_regardless_of_order(self) -> None:
        a = ValueSnapshot.of([("code", "NN"), ("sortOrder", 1)])
        b = ValueSnapshot.of([("sortOrder", 1), ("code", "NN")])
        assert a == b
        assert hash(a) == hash(b)

    def test_none_and_missing_compare_equal(self) -> None:
        assert ValueSnapshot.of(code="NN", validTo=None) == ValueSnapshot.of(code="NN")

    def test_differs_on_single_value(self) -> None:
        a = ValueSnapshot.of(code="NN", sortOrder=1)
        b = ValueSnapshot.of(code="NN", sortOrder=2)
        assert a != b
        assert a.changed_keys(b) == ["sortOrder"]

    def test_changed_keys_includes_added_and_removed(self) -> None:
        a = ValueSnapshot.of(code="NN", validTo=date(2030, 1, 1))
        b = ValueSnapshot.of(code="NN", sortOrder=3)
        assert a.changed_keys(b) == ["validTo", "sortOrder"]

    def test_compares_with_plain_mapping(self) -> None:
        assert ValueSnapshot.of(code="NN") == {"code": "NN", "nameEn": None}


class TestSerialization:
    def test_compact_json_keeps_order_and_unicode(self) -> None:
        snap = ValueSnapshot.of([("code", "NN"), ("nameCs", "Nízké napětí")])
        assert snap.to_json() == '{"code":"NN","nameCs":"Nízké napětí"}'

    def test_empty_snapshot_serializes_to_empty_object(self) -> None:
        assert ValueSnapshot.of().to_json() == "{}"

    def test_dates_decimals_and_enums(self) -> None:
        snap = ValueSnapshot.of(
            validFrom=date(2024, 1, 31),
            at=datetime(2024, 1, 31, 12, 0, tzinfo=UTC),
            whole=Decimal("2"),
            frac=Decimal("2.5"),
            kind=ChangeType.UPDATE,
        )
        assert snap.to_json() == (
            '{"validFrom":"2024-01-31","at":"2024-01-31T12:00:00+00:00",'
            '"whole":2,"frac":2.5,"kind":"UPDATE"}'
        )

    def test_non_scalar_value_fails(self) -> None:
        with pytest.raises(TypeError):
            ValueSnapshot.of(tags=object()).to_json()

    def test_nan_fails(self) -> None:
        with pytest.raises(ValueError):
            ValueSnapshot.of(ratio=float("nan")).to_json()

    def test_text_fallback(self) -> None:
        snap = ValueSnapshot.of([("code", "NN"), ("sortOrder", 1)])
        assert snap.to_text() == "{code=NN, sortOrder=1}"
