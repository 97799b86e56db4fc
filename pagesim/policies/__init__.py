"""Concrete page replacement policies."""

from .fifo import FIFOPolicy  # noqa: F401
from .lru import LRUPolicy  # noqa: F401
