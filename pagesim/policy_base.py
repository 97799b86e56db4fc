from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional


class LoadResult(NamedTuple):
    """Outcome of a single page reference.

    ``evicted`` is None when nothing left the table: either the page was
    already resident, or it faulted into a free slot.
    """

    faulted: bool
    evicted: Optional[int] = None


class PageTablePolicy(ABC):

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("Page table capacity must be a positive integer")
        self._capacity = capacity
        self._fault_count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def fault_count(self) -> int:
        """Number of references that were not resident when loaded."""
        return self._fault_count

    @abstractmethod
    def current_pages(self) -> List[int]:
        """Return a snapshot copy of the resident pages."""

    @abstractmethod
    def load_page(self, page: int) -> LoadResult:
        """Reference a page; fault it in and evict if the table overflows."""

    def __len__(self) -> int:
        return len(self.current_pages())

    def __contains__(self, page: object) -> bool:
        return page in self.current_pages()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"faults={self._fault_count}, pages={self.current_pages()})"
        )
