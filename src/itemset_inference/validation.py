"""Checks on pools and on the coverings produced by inference."""

from dataclasses import dataclass
from typing import AbstractSet, List, Mapping

from .cost_model import Item, Itemset, Transaction, covering_cost, filter_itemsets


def check_probabilities(itemsets: Mapping[Itemset, float]) -> None:
    """Raise ValueError if any probability lies outside the open interval (0, 1)."""
    for itemset, p in itemsets.items():
        if not 0.0 < p < 1.0:
            raise ValueError(
                f"Itemset {sorted(itemset)} has probability {p}, expected 0 < p < 1"
            )


def verify_covering(
    covering: AbstractSet[Itemset],
    itemsets: Mapping[Itemset, float],
    transaction: Transaction,
) -> bool:
    """Check that *covering* is a complete covering drawn from the filtered pool.

    Returns True iff:
      1. Every selected itemset is in the filtered pool.
      2. Every transaction item is contained in some selected itemset.
    """
    filtered = filter_itemsets(itemsets, transaction)
    covered = set()
    for itemset in covering:
        if itemset not in filtered:
            return False
        covered |= itemset
    return set(transaction) <= covered


@dataclass
class ValidationResult:
    """Detailed covering validation result."""
    valid: bool
    num_itemsets: int
    num_items_covered: int
    num_items_expected: int
    missing_items: List[Item]
    foreign_itemsets: List[Itemset]
    expected_cost: float


def validate_covering(
    covering: AbstractSet[Itemset],
    itemsets: Mapping[Itemset, float],
    transaction: Transaction,
) -> ValidationResult:
    """Detailed validation of a covering.

    ``expected_cost`` is the cost an algorithm must report for this covering.
    """
    filtered = filter_itemsets(itemsets, transaction)
    items = set(transaction)
    covered = set()
    foreign: List[Itemset] = []

    for itemset in covering:
        if itemset not in filtered:
            foreign.append(itemset)
            continue
        covered |= itemset

    missing = [item for item in transaction if item not in covered]

    return ValidationResult(
        valid=len(missing) == 0 and len(foreign) == 0,
        num_itemsets=len(covering),
        num_items_covered=len(covered & items),
        num_items_expected=len(items),
        missing_items=missing,
        foreign_itemsets=foreign,
        expected_cost=covering_cost(covering, filtered),
    )
