from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .policies import FIFOPolicy, LRUPolicy
from .policy_base import PageTablePolicy

logger = logging.getLogger(__name__)

PolicyFactory = Callable[[int], PageTablePolicy]

POLICY_FACTORIES: Dict[str, PolicyFactory] = {
    "FIFO": FIFOPolicy,
    "LRU": LRUPolicy,
}


@dataclass(frozen=True)
class TraceStep:
    """One reference of a trial, with the resident set right after it."""

    index: int
    page: int
    faulted: bool
    evicted: Optional[int]
    resident: List[int]


@dataclass
class SimulationResult:
    """Statistics of one policy run over a full trace."""

    policy: str
    capacity: int
    total_requests: int
    faults: int
    steps: List[TraceStep] = field(default_factory=list)

    @property
    def hits(self) -> int:
        return self.total_requests - self.faults

    @property
    def fault_frequency(self) -> float:
        """Faults / total references, as a plain ratio."""
        return self.faults / self.total_requests if self.total_requests else 0.0

    @property
    def fault_rate(self) -> float:
        return self.fault_frequency * 100


class Simulator:
    """Feeds a reference trace, in order, into a page table policy."""

    def __init__(self, trace: Iterable[int]):
        self.trace: List[int] = list(trace)

    def run(self, policy_name: str, policy: PageTablePolicy) -> SimulationResult:
        """Run the whole trace on ``policy`` and record every step."""
        logger.debug("Running %s with capacity %d over %d references",
                     policy_name, policy.capacity, len(self.trace))
        steps: List[TraceStep] = []
        for index, page in enumerate(self.trace):
            result = policy.load_page(page)
            steps.append(
                TraceStep(
                    index=index,
                    page=page,
                    faulted=result.faulted,
                    evicted=result.evicted,
                    resident=policy.current_pages(),
                )
            )

        sim_result = SimulationResult(
            policy=policy_name,
            capacity=policy.capacity,
            total_requests=len(self.trace),
            faults=policy.fault_count,
            steps=steps,
        )
        logger.info("%s, RSS = %d: %d faults (%.6f)", policy_name, policy.capacity,
                    sim_result.faults, sim_result.fault_frequency)
        return sim_result


def compare_policies(
    trace: Iterable[int],
    capacities: Sequence[int],
    factories: Optional[Dict[str, PolicyFactory]] = None,
) -> Dict[int, List[SimulationResult]]:
    """Run every policy at every capacity, each trial on a fresh instance."""
    simulator = Simulator(trace)
    factories = factories or POLICY_FACTORIES
    results: Dict[int, List[SimulationResult]] = {}
    for capacity in capacities:
        results[capacity] = [
            simulator.run(name, factory(capacity)) for name, factory in factories.items()
        ]
    return results
