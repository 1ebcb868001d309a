"""Value snapshot: the unit of comparison for audit diffs.

A snapshot is an ordered field-name -> scalar map describing an entity's
relevant state at one point in time. Absent (None) values are dropped so
that "unset" and "missing" compare equal.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any


def _json_default(value: Any) -> Any:
    """Render the non-JSON scalars allowed in a snapshot; reject everything else."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(
        f"Snapshot value of type {type(value).__name__} is not a supported scalar"
    )


@dataclass(frozen=True, eq=False)
class ValueSnapshot:
    """Immutable, ordered field map with set-like equality.

    Build with ValueSnapshot.of(...) which drops None values. Two snapshots
    are equal when they hold the same key/value pairs, regardless of order.
    """

    pairs: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def of(
        cls,
        values: ValueSnapshot | Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None,
        /,
        **fields: Any,
    ) -> ValueSnapshot:
        """Build a snapshot from a mapping, (key, value) pairs and/or keyword fields.

        Keys are coerced to str; pairs whose value is None are dropped.
        Later keys overwrite earlier ones but keep the first position.
        """
        if isinstance(values, ValueSnapshot) and not fields:
            return values
        ordered: dict[str, Any] = {}
        if values is not None:
            if isinstance(values, ValueSnapshot):
                source: Iterable[tuple[Any, Any]] = values.pairs
            elif isinstance(values, Mapping):
                source = values.items()
            else:
                source = values
            for key, value in source:
                if value is not None:
                    ordered[str(key)] = value
        for key, value in fields.items():
            if value is not None:
                ordered[key] = value
        return cls(tuple(ordered.items()))

    def as_dict(self) -> dict[str, Any]:
        """Return a fresh insertion-ordered dict copy."""
        return dict(self.pairs)

    def keys(self) -> list[str]:
        return [key for key, _ in self.pairs]

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __bool__(self) -> bool:
        return bool(self.pairs)

    def __getitem__(self, key: str) -> Any:
        for name, value in self.pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueSnapshot):
            return self.as_dict() == other.as_dict()
        if isinstance(other, Mapping):
            return self == ValueSnapshot.of(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self.keys()))

    def changed_keys(self, other: ValueSnapshot) -> list[str]:
        """Return keys whose value differs between self and other (added/removed included)."""
        mine, theirs = self.as_dict(), other.as_dict()
        keys = list(mine) + [k for k in theirs if k not in mine]
        return [k for k in keys if mine.get(k) != theirs.get(k)]

    def to_json(self) -> str:
        """Serialize to a compact JSON object, preserving field order.

        Raises:
            TypeError: A value is not a supported scalar.
            ValueError: A float value is NaN or infinite.
        """
        return json.dumps(
            self.as_dict(),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
            default=_json_default,
        )

    def to_text(self) -> str:
        """Best-effort plain-text rendering, e.g. ``{code=NN, sortOrder=1}``.

        Used when to_json() fails; never raises for ordinary objects.
        """
        return "{" + ", ".join(f"{key}={value}" for key, value in self.pairs) + "}"
