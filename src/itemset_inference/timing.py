"""Timing utilities for covering-program solver instrumentation."""

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class SolveRecord:
    """Timing record for a single CoveringSolver.solve() invocation."""

    solve_seconds: float = 0.0
    num_variables: int = 0
    num_selected: int = 0
    feasible: bool = True


class SolverTimer:
    """Accumulates per-call records for a covering-program solver.

    Usage::

        timer = SolverTimer()
        algorithm = ExactCover(solver=HighsCoveringSolver(timer=timer))
        for transaction in transactions:
            algorithm.cover(itemsets, transaction)
        print(timer.summary())
    """

    def __init__(self) -> None:
        self.calls: List[SolveRecord] = []

    def record(
        self,
        solve_seconds: float = 0.0,
        num_variables: int = 0,
        num_selected: int = 0,
        feasible: bool = True,
    ) -> None:
        self.calls.append(SolveRecord(
            solve_seconds=solve_seconds,
            num_variables=num_variables,
            num_selected=num_selected,
            feasible=feasible,
        ))

    def reset(self) -> None:
        self.calls.clear()

    @property
    def num_calls(self) -> int:
        return len(self.calls)

    @property
    def num_infeasible(self) -> int:
        return sum(1 for c in self.calls if not c.feasible)

    @property
    def total_solve_seconds(self) -> float:
        return sum(c.solve_seconds for c in self.calls)

    @property
    def avg_solve_seconds(self) -> float:
        return self.total_solve_seconds / self.num_calls if self.calls else 0.0

    @property
    def avg_selected_per_call(self) -> float:
        if not self.calls:
            return 0.0
        return sum(c.num_selected for c in self.calls) / self.num_calls

    def summary(self) -> Dict[str, float]:
        """Return a dict of timing statistics suitable for JSON serialization."""
        return {
            "num_solver_calls": self.num_calls,
            "num_infeasible": self.num_infeasible,
            "total_solve_seconds": round(self.total_solve_seconds, 4),
            "avg_solve_seconds": round(self.avg_solve_seconds, 4),
            "avg_selected_per_call": round(self.avg_selected_per_call, 2),
        }

    def __repr__(self) -> str:
        s = self.summary()
        return (
            f"SolverTimer({s['num_solver_calls']} calls, "
            f"solve={s['total_solve_seconds']}s, "
            f"infeasible={s['num_infeasible']})"
        )
