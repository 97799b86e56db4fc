"""PAGESIM - FIFO / LRU page replacement simulator package."""

from .policy_base import LoadResult, PageTablePolicy  # noqa: F401
from .policies import FIFOPolicy, LRUPolicy  # noqa: F401
from .simulator import Simulator, SimulationResult, compare_policies  # noqa: F401
from .metrics import MetricsCollector, ReportConfig  # noqa: F401
