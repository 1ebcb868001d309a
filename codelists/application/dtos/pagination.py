"""Paginated result container shared by audit and codelist queries."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results. page is zero-based."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 0
    page_size: int = 25

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size
