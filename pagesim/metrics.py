from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .simulator import SimulationResult, TraceStep


@dataclass
class ReportConfig:
    trace_name: str
    total_requests: int
    capacities: Sequence[int]


class MetricsCollector:
    """render simulation results as text tables"""

    def __init__(self, config: ReportConfig):
        self.config = config

    def _build_table(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        align: Optional[Sequence[str]] = None,
    ) -> str:
        if not rows:
            return "(No data)"
        align = align or ["<"] * len(headers)
        widths = [
            max(len(str(headers[i])), *(len(str(row[i])) for row in rows)) for i in range(len(headers))
        ]

        def _format_row(row: Sequence[str], header: bool = False) -> str:
            cells = []
            for i in range(len(headers)):
                cell = str(row[i])
                cells.append(cell.ljust(widths[i]) if header or align[i] == "<" else cell.rjust(widths[i]))
            return "| " + " | ".join(cells) + " |"

        header_line = _format_row(headers, header=True)
        separator = "|-" + "-|-".join("-" * widths[i] for i in range(len(headers))) + "-|"
        body_lines = [_format_row(row) for row in rows]
        return "\n".join([header_line, separator, *body_lines])

    @staticmethod
    def _replaced_cell(step: TraceStep) -> str:
        if not step.faulted:
            return "none"
        return "empty" if step.evicted is None else str(step.evicted)

    def build_step_table(self, result: SimulationResult) -> str:
        rows = [
            (
                f"Trial {step.index}",
                str(step.page),
                self._replaced_cell(step),
                ", ".join(str(page) for page in step.resident),
            )
            for step in result.steps
        ]
        return self._build_table(
            ("", "New Page", "Page Replaced", "Current Page List"),
            rows,
            align=("<", ">", ">", ">"),
        )

    def build_summary_table(self, results_by_capacity: Dict[int, List[SimulationResult]]) -> str:
        policies: List[str] = []
        for results in results_by_capacity.values():
            for result in results:
                if result.policy not in policies:
                    policies.append(result.policy)

        headers = ["Resident Set Size"]
        for policy in policies:
            headers.extend([f"# Faults using {policy}", f"{policy} Page Fault Frequency"])

        rows = []
        for capacity, results in results_by_capacity.items():
            by_policy = {result.policy: result for result in results}
            row = [str(capacity)]
            for policy in policies:
                result = by_policy.get(policy)
                if result is None:
                    row.extend(["-", "-"])
                else:
                    row.extend([str(result.faults), f"{result.fault_frequency:.6f}"])
            rows.append(row)
        return self._build_table(headers, rows, align=[">"] * len(headers))

    def build_report(
        self,
        results_by_capacity: Dict[int, List[SimulationResult]],
        detail_capacity: Optional[int] = None,
    ) -> str:
        lines = [
            "[Simulation Configuration]",
            f"- Trace: {self.config.trace_name}",
            f"- Total References: {self.config.total_requests}",
            f"- Resident Set Sizes: {', '.join(str(c) for c in self.config.capacities)}",
            "",
        ]
        for result in results_by_capacity.get(detail_capacity, []):
            lines.append(f"Data Set 1: {result.policy}, RSS = {result.capacity}")
            lines.append(self.build_step_table(result))
            lines.append("")

        lines.append("[Summary]")
        lines.append(self.build_summary_table(results_by_capacity))
        return "\n".join(lines)
