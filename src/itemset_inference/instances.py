"""Reference covering instances for tests and benchmarks."""

import math
import random
from typing import Dict, List, Tuple

from .cost_model import Item, Itemset

Instance = Tuple[List[Item], Dict[Itemset, float]]


def scenario_split() -> Instance:
    """{1,2} + {3} beats the single itemset {1,2,3}."""
    return [1, 2, 3], {
        frozenset([1, 2]): 0.9,
        frozenset([3]): 0.8,
        frozenset([1, 2, 3]): 0.4,
    }


def foreign_itemset() -> Instance:
    """Pool with itemsets mentioning item 4, which is not in the transaction."""
    return [1, 2, 3], {
        frozenset([4]): 0.7,
        frozenset([1]): 0.6,
        frozenset([2]): 0.6,
        frozenset([3]): 0.6,
        frozenset([1, 2, 4]): 0.9,
    }


def empty_transaction() -> Instance:
    """No items to explain; nothing survives filtering."""
    return [], {
        frozenset([1]): 0.5,
        frozenset([2, 3]): 0.3,
    }


def uncoverable_item() -> Instance:
    """Item 3 is contained in no candidate itemset."""
    return [1, 2, 3], {
        frozenset([1, 2]): 0.7,
        frozenset([2]): 0.4,
    }


def singletons() -> Instance:
    """One singleton itemset per item."""
    return [1, 2, 3, 4], {
        frozenset([1]): 0.9,
        frozenset([2]): 0.8,
        frozenset([3]): 0.7,
        frozenset([4]): 0.6,
    }


def greedy_trap() -> Instance:
    """The cheapest itemset per item is not part of the optimal covering.

    Greedy picks {1,2,3,4} and pays for leaving {1,2} and {3,4} out; the
    optimum is {1,2} + {3,4}.
    """
    return [1, 2, 3, 4], {
        frozenset([1, 2, 3, 4]): 0.3,
        frozenset([1, 2]): 0.5,
        frozenset([3, 4]): 0.5,
    }


def random_instance(num_items: int, num_itemsets: int, seed: int = 42) -> Instance:
    """Random pool over items 0..num_items-1.

    Every singleton is included so that a complete covering always exists.
    A few itemsets mention items outside the transaction.
    """
    rng = random.Random(seed)
    transaction = list(range(num_items))
    pool: Dict[Itemset, float] = {}
    for item in transaction:
        pool[frozenset([item])] = rng.uniform(0.05, 0.95)

    universe = list(range(num_items + 2))
    max_size = min(4, len(universe))
    for _ in range(num_itemsets):
        size = rng.randint(2, max_size)
        itemset = frozenset(rng.sample(universe, size))
        pool.setdefault(itemset, rng.uniform(0.05, 0.95))
    return transaction, pool


KNOWN_OPTIMAL = {
    "scenario_split": -math.log(0.9) - math.log(0.8) - math.log(0.6),
    "foreign_itemset": -3 * math.log(0.6),
    "empty_transaction": 0.0,
    "singletons": -math.log(0.9) - math.log(0.8) - math.log(0.7) - math.log(0.6),
    "greedy_trap": -2 * math.log(0.5) - math.log(0.7),
}

TEST_INSTANCES = {
    "scenario_split": scenario_split,
    "foreign_itemset": foreign_itemset,
    "empty_transaction": empty_transaction,
    "uncoverable_item": uncoverable_item,
    "singletons": singletons,
    "greedy_trap": greedy_trap,
}
