"""Tests for the trial driver and its results."""

import pytest

from pagesim import FIFOPolicy, LRUPolicy, Simulator, compare_policies
from pagesim.simulator import POLICY_FACTORIES, SimulationResult
from pagesim.trace_suite import DEFAULT_TRACE


class TestSimulator:

    def test_records_one_step_per_reference(self) -> None:
        result = Simulator([1, 2, 3, 1, 4]).run("LRU", LRUPolicy(3))
        assert [step.index for step in result.steps] == [0, 1, 2, 3, 4]
        assert [step.page for step in result.steps] == [1, 2, 3, 1, 4]
        assert [step.faulted for step in result.steps] == [True, True, True, False, True]
        assert [step.evicted for step in result.steps] == [None, None, None, None, 2]

    def test_step_snapshots_resident_set(self) -> None:
        result = Simulator([1, 2, 3, 4]).run("FIFO", FIFOPolicy(3))
        assert [step.resident for step in result.steps] == [
            [1],
            [1, 2],
            [1, 2, 3],
            [2, 3, 4],
        ]

    def test_result_totals(self) -> None:
        result = Simulator(DEFAULT_TRACE).run("FIFO", FIFOPolicy(3))
        assert result.policy == "FIFO"
        assert result.capacity == 3
        assert result.total_requests == 33
        assert result.faults == 20
        assert result.hits == 13
        assert result.fault_frequency == pytest.approx(20 / 33)
        assert result.fault_rate == pytest.approx(2000 / 33)

    def test_trace_is_copied(self) -> None:
        trace = [1, 2]
        simulator = Simulator(trace)
        trace.append(3)
        assert simulator.run("FIFO", FIFOPolicy(2)).total_requests == 2

    def test_empty_trace_has_zero_frequency(self) -> None:
        result = Simulator([]).run("LRU", LRUPolicy(3))
        assert result.faults == 0
        assert result.fault_frequency == 0.0
        assert result.steps == []


class TestComparePolicies:

    def test_groups_results_by_capacity(self) -> None:
        results = compare_policies(DEFAULT_TRACE, [3, 5, 7])
        assert list(results) == [3, 5, 7]
        faults = {
            capacity: {r.policy: r.faults for r in group} for capacity, group in results.items()
        }
        assert faults == {
            3: {"FIFO": 20, "LRU": 19},
            5: {"FIFO": 16, "LRU": 16},
            7: {"FIFO": 14, "LRU": 13},
        }

    def test_each_trial_gets_a_fresh_policy(self) -> None:
        created = []

        def factory(capacity):
            policy = FIFOPolicy(capacity)
            created.append(policy)
            return policy

        compare_policies([1, 2, 3], [1, 2], {"FIFO": factory})
        assert len(created) == 2
        assert created[0] is not created[1]
        assert [p.capacity for p in created] == [1, 2]

    def test_default_factories(self) -> None:
        assert list(POLICY_FACTORIES) == ["FIFO", "LRU"]
        results = compare_policies([1], [1])
        assert all(isinstance(r, SimulationResult) for r in results[1])
        assert [r.policy for r in results[1]] == ["FIFO", "LRU"]

    def test_invalid_capacity_propagates(self) -> None:
        with pytest.raises(ValueError):
            compare_policies([1, 2], [0])
