"""Exact covering by binary integer programming."""

import logging
import math
from typing import Mapping, Optional, Set, Union

from .base import InferenceAlgorithm
from ..cost_model import Itemset, Transaction, covering_cost, filter_itemsets
from ..covering_program import CoveringSolver, build_covering_program, make_covering_solver
from ..incidence import uncoverable_items

logger = logging.getLogger(__name__)


class ExactCover(InferenceAlgorithm):
    """Minimum-cost complete covering via an ILP solver.

    Unlike the approximations, every transaction item must be covered.  When
    the solver finds no solution the cost is ``math.inf`` and nothing is
    added to the covering.

    Args:
        solver: A CoveringSolver, or the name of one (default "highs").
        time_limit: Time limit in seconds passed to a solver built by name.
    """

    def __init__(
        self,
        solver: Union[CoveringSolver, str] = "highs",
        time_limit: Optional[float] = None,
    ) -> None:
        if isinstance(solver, str):
            solver = make_covering_solver(solver, time_limit=time_limit)
        self.solver = solver

    def infer(
        self,
        covering: Set[Itemset],
        itemsets: Mapping[Itemset, float],
        transaction: Transaction,
    ) -> float:
        filtered = filter_itemsets(itemsets, transaction)
        program = build_covering_program(filtered, transaction)

        sol = self.solver.solve(program)
        if sol is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "No covering found; uncoverable items: %s",
                    uncoverable_items(filtered, transaction),
                )
            return math.inf

        selected = {
            itemset for itemset, value in zip(filtered, sol) if int(round(value)) == 1
        }
        covering.update(selected)
        return covering_cost(selected, filtered)
