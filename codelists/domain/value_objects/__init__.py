"""Domain value objects and shared value types."""

from codelists.domain.value_objects.snapshot import ValueSnapshot

__all__ = [
    "ValueSnapshot",
]
