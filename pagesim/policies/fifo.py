from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List

from ..policy_base import LoadResult, PageTablePolicy

logger = logging.getLogger(__name__)


class FIFOPolicy(PageTablePolicy):
    """Evicts the page that arrived first; hits never reorder the queue."""

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.queue: Deque[int] = deque()

    def current_pages(self) -> List[int]:
        return list(self.queue)

    def load_page(self, page: int) -> LoadResult:
        # linear scan, capacity is small
        if page in self.queue:
            return LoadResult(False)

        self._fault_count += 1
        self.queue.append(page)
        evicted = None
        if len(self.queue) > self._capacity:
            evicted = self.queue.popleft()
            logger.debug("FIFO evicted page %d for page %d", evicted, page)
        return LoadResult(True, evicted)
