from __future__ import annotations

import logging
from typing import Dict, List

from ..policy_base import LoadResult, PageTablePolicy

logger = logging.getLogger(__name__)


class LRUPolicy(PageTablePolicy):
    """LRU page table driven by per-page recency counters.

    Every resident page carries the number of references since it was last
    touched (0 = touched by the current reference). Each load resets the
    referenced page to 0 and ages all other pages by one, so eviction picks
    the page with the largest counter. When several pages share the maximum,
    the one inserted earliest wins; resident counters are always distinct
    under this aging scheme, so that rule never actually has to break a tie.
    """

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.ages: Dict[int, int] = {}

    def current_pages(self) -> List[int]:
        return list(self.ages)

    def load_page(self, page: int) -> LoadResult:
        faulted = page not in self.ages
        if faulted:
            self._fault_count += 1

        for resident in self.ages:
            self.ages[resident] += 1
        self.ages[page] = 0

        evicted = None
        if len(self.ages) > self._capacity:
            evicted = self._oldest_page()
            del self.ages[evicted]
            logger.debug("LRU evicted page %d for page %d", evicted, page)
        return LoadResult(faulted, evicted)

    def _oldest_page(self) -> int:
        oldest = None
        oldest_age = -1
        for resident, age in self.ages.items():
            if age > oldest_age:
                oldest, oldest_age = resident, age
        return oldest
