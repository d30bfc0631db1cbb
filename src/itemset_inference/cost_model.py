"""Candidate filtering and the noisy-OR cost model shared by every inference algorithm.

Each filtered itemset is an independent latent indicator with probability p:
selecting it costs -log(p) and leaving it out costs -log(1 - p).  The total
cost of a covering is the negative log-likelihood of that joint on/off
configuration.
"""

import math
from typing import AbstractSet, Dict, FrozenSet, Mapping, Sequence

Item = int
Itemset = FrozenSet[Item]
Transaction = Sequence[Item]


def filter_itemsets(
    itemsets: Mapping[Itemset, float],
    transaction: Transaction,
) -> Dict[Itemset, float]:
    """Restrict the pool to itemsets contained in the transaction with p > 0.

    Insertion order of *itemsets* is preserved.
    """
    items = set(transaction)
    return {
        itemset: p
        for itemset, p in itemsets.items()
        if p > 0.0 and itemset <= items
    }


def on_cost(p: float) -> float:
    """Cost of selecting an itemset with probability *p*."""
    return -math.log(p)


def off_cost(p: float) -> float:
    """Cost of leaving an itemset with probability *p* out of the covering."""
    return -math.log(1.0 - p)


def exact_weight(p: float) -> float:
    """Linear objective coefficient log((1-p)/p), i.e. on_cost - off_cost."""
    return math.log((1.0 - p) / p)


def covering_cost(
    covering: AbstractSet[Itemset],
    filtered: Mapping[Itemset, float],
) -> float:
    """Total cost of *covering* over the filtered pool.

    Selected itemsets contribute on_cost, every other filtered itemset
    contributes off_cost.
    """
    total = 0.0
    for itemset, p in filtered.items():
        total += on_cost(p) if itemset in covering else off_cost(p)
    return total
