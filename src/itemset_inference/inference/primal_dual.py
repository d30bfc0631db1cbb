"""Randomized primal-dual covering."""

import logging
import random
from typing import Dict, List, Mapping, Optional, Set

from .base import InferenceAlgorithm
from ..cost_model import (
    Itemset,
    Transaction,
    filter_itemsets,
    off_cost,
    on_cost,
)

logger = logging.getLogger(__name__)


class PrimalDualCover(InferenceAlgorithm):
    """f-approximate weighted set cover by growing one dual variable per item.

    f is the largest number of filtered itemsets containing a single item.
    Items are visited in random order; each visit raises the item's dual
    until the cheapest itemset containing it becomes tight, selects that
    itemset and marks all of its items covered.  The returned cost charges
    each selected itemset the dual increase that made it tight (at most its
    -log(p)) and every other filtered itemset -log(1 - p).

    Args:
        seed: Seed for a private random.Random.  Ignored when *rng* is given.
        rng: Random source to draw items from.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def infer(
        self,
        covering: Set[Itemset],
        itemsets: Mapping[Itemset, float],
        transaction: Transaction,
    ) -> float:
        filtered = filter_itemsets(itemsets, transaction)
        not_covered: List[int] = list(transaction)

        # Residual cost per itemset, in pool order
        residual: Dict[Itemset, float] = {s: on_cost(p) for s, p in filtered.items()}
        selected: Set[Itemset] = set()
        total_cost = 0.0

        while not_covered:
            element = not_covered[self._rng.randrange(len(not_covered))]

            best_set: Optional[Itemset] = None
            delta = float("inf")
            for itemset, cost in residual.items():
                if element in itemset and cost < delta:
                    delta = cost
                    best_set = itemset

            if best_set is None:
                logger.debug(
                    "Incomplete covering: no itemset contains %s, %d items uncovered",
                    element,
                    len(not_covered),
                )
                break

            selected.add(best_set)
            not_covered = [item for item in not_covered if item not in best_set]
            total_cost += delta

            # Make the element's dual binding
            for itemset in residual:
                if element in itemset:
                    residual[itemset] -= delta

            logger.debug("Item %s: selected %s (dual %.4f)", element, sorted(best_set), delta)

        # Add on cost of unselected itemsets
        for itemset, p in filtered.items():
            if itemset not in selected:
                total_cost += off_cost(p)

        covering.update(selected)
        return total_cost
