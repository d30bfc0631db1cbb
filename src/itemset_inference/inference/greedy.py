"""Greedy cost-effectiveness covering."""

import logging
from typing import Mapping, Optional, Set

from .base import InferenceAlgorithm
from ..cost_model import (
    Itemset,
    Transaction,
    covering_cost,
    filter_itemsets,
    on_cost,
)

logger = logging.getLogger(__name__)


class GreedyCover(InferenceAlgorithm):
    """O(log n)-approximate weighted set cover under the noisy-OR cost.

    Each step selects the filtered itemset with the smallest
    -log(p) / (number of its items not yet covered); the first itemset in
    pool order wins ties.  Stops early, leaving items uncovered, when no
    itemset covers anything new.
    """

    def infer(
        self,
        covering: Set[Itemset],
        itemsets: Mapping[Itemset, float],
        transaction: Transaction,
    ) -> float:
        filtered = filter_itemsets(itemsets, transaction)
        items = set(transaction)
        covered: Set[int] = set()
        selected: Set[Itemset] = set()

        while not items <= covered:
            best_set: Optional[Itemset] = None
            min_cost_per_item = float("inf")

            for itemset, p in filtered.items():
                not_covered = len(itemset - covered)
                if not_covered == 0:
                    continue
                cost_per_item = on_cost(p) / not_covered
                if cost_per_item < min_cost_per_item:
                    min_cost_per_item = cost_per_item
                    best_set = itemset

            if best_set is None:
                logger.debug(
                    "Incomplete covering: items %s left uncovered",
                    sorted(items - covered),
                )
                break

            selected.add(best_set)
            covered |= best_set
            logger.debug(
                "Selected %s (cost per item %.4f)", sorted(best_set), min_cost_per_item
            )

        covering.update(selected)
        return covering_cost(selected, filtered)
