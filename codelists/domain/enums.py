"""Domain enumerations for the codelists service.

Enums represent fixed sets of domain values (change kinds, hierarchy levels).
"""

from enum import Enum, IntEnum


class ChangeType(str, Enum):
    """Kind of mutation recorded in the audit log and announced to subscribers."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, raw: str | None) -> "ChangeType | None":
        """Return the matching member, or None for blank or unknown input."""
        if not raw:
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


class ClassificationLevel(IntEnum):
    """Levels of the building classification (KSO) tree.

    Codes follow a dotted numeric path: 801, 801.1, 801.11, 801.11.1.
    """

    PODSKUPINA = 1
    ODDIL = 2
    PODODDIL = 3
    KONSTRUKCNE_MATERIALOVA_CHARAKTERISTIKA = 4

    @classmethod
    def is_valid(cls, level: int | None) -> bool:
        """Return whether level is one of the four supported levels."""
        return level is not None and cls.PODSKUPINA <= level <= max(cls)
