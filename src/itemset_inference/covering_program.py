"""Binary covering program and the MILP solvers that solve it.

Formulation over the filtered pool (one binary variable per itemset):

    minimize   sum_s  log((1 - p_s) / p_s) * z_s
    s.t.       sum_{s : i in s} z_s >= 1     for every transaction item i
               z_s in {0, 1}
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Mapping, Optional

import numpy as np
from scipy.optimize import milp, LinearConstraint, Bounds

from .cost_model import Item, Itemset, Transaction, exact_weight
from .timing import SolverTimer

logger = logging.getLogger(__name__)


@dataclass
class CoveringProgram:
    """Solver-independent description of a binary covering program.

    Attributes:
        objective: One coefficient per variable (filtered itemset).
        constraints: 0/1 matrix with one row per item; each row must reach >= 1.
        integrality: 1 for every binary variable.
        items: The item behind each constraint row.
    """

    objective: np.ndarray
    constraints: np.ndarray
    integrality: np.ndarray
    items: List[Item]

    @property
    def num_variables(self) -> int:
        return len(self.objective)

    @property
    def num_constraints(self) -> int:
        return len(self.items)

    @property
    def has_empty_row(self) -> bool:
        """True when some item is contained in no itemset, making the program infeasible."""
        if self.num_constraints == 0:
            return False
        return bool(np.any(self.constraints.sum(axis=1) == 0))


def build_covering_program(
    filtered: Mapping[Itemset, float],
    transaction: Transaction,
) -> CoveringProgram:
    """Build the covering program for *transaction* over the filtered pool."""
    itemsets = list(filtered)
    items = list(transaction)

    c = np.array([exact_weight(p) for p in filtered.values()], dtype=float)
    A = np.zeros((len(items), len(itemsets)))
    for row, item in enumerate(items):
        for col, itemset in enumerate(itemsets):
            if item in itemset:
                A[row, col] = 1.0

    return CoveringProgram(
        objective=c,
        constraints=A,
        integrality=np.ones(len(itemsets), dtype=int),
        items=items,
    )


class CoveringSolver(ABC):
    """Interface for solvers of binary covering programs."""

    @abstractmethod
    def solve(self, program: CoveringProgram) -> Optional[np.ndarray]:
        """Return one solved value per variable, or None when no solution exists.

        Args:
            program: The covering program to solve.

        Returns:
            An array of length ``program.num_variables`` (values to be rounded
            to 0/1), or None if the program is infeasible or the solver failed.
        """


class HighsCoveringSolver(CoveringSolver):
    """Solve covering programs with HiGHS via scipy.optimize.milp.

    Args:
        time_limit: Optional time limit in seconds.  On timeout the best
            feasible assignment found is returned, if any.
        mip_rel_gap: Relative optimality gap at which HiGHS stops.
        timer: Optional SolverTimer that records every solve() call.
    """

    def __init__(
        self,
        time_limit: Optional[float] = None,
        mip_rel_gap: float = 0.0,
        timer: Optional[SolverTimer] = None,
    ) -> None:
        self.time_limit = time_limit
        self.mip_rel_gap = mip_rel_gap
        self.timer = timer

    def solve(self, program: CoveringProgram) -> Optional[np.ndarray]:
        start_time = time.time()
        x = self._solve(program)
        if self.timer is not None:
            self.timer.record(
                solve_seconds=time.time() - start_time,
                num_variables=program.num_variables,
                num_selected=int(np.sum(np.round(x))) if x is not None else 0,
                feasible=x is not None,
            )
        return x

    def _solve(self, program: CoveringProgram) -> Optional[np.ndarray]:
        if program.has_empty_row:
            logger.debug("Covering program has an item no itemset contains")
            return None

        n = program.num_variables
        if n == 0:
            # Only feasible without constraints
            return np.zeros(0) if program.num_constraints == 0 else None

        if program.num_constraints > 0:
            constraints = [LinearConstraint(program.constraints, 1.0, np.inf)]
        else:
            constraints = []

        options = {"mip_rel_gap": self.mip_rel_gap}
        if self.time_limit is not None:
            options["time_limit"] = float(self.time_limit)

        try:
            result = milp(
                c=program.objective,
                constraints=constraints,
                integrality=program.integrality,
                bounds=Bounds(lb=0, ub=1),
                options=options,
            )
        except ValueError as e:
            logger.debug("HiGHS rejected covering program: %s", e)
            return None

        if result.x is None or len(result.x) != n:
            logger.debug("HiGHS found no solution: %s", result.message)
            return None

        if not result.success:
            logger.debug("HiGHS returned a feasible, unproven solution: %s", result.message)
        return np.asarray(result.x, dtype=float)


def make_covering_solver(name: str = "highs", **kwargs) -> CoveringSolver:
    """Return the covering solver called *name*."""
    if name == "highs":
        return HighsCoveringSolver(**kwargs)
    raise ValueError(f"Unknown ILP solver: {name}. Use 'highs'.")
