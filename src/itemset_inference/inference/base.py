"""Abstract base class for inference algorithms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Set

from ..cost_model import Itemset, Transaction


@dataclass
class InferenceResult:
    """Covering chosen for one transaction and its cost."""

    covering: Set[Itemset] = field(default_factory=set)
    cost: float = 0.0


class InferenceAlgorithm(ABC):
    """Interface for algorithms that explain a transaction with candidate itemsets.

    An algorithm picks a covering from the filtered pool (itemsets contained
    in the transaction with probability > 0) and returns its noisy-OR cost:
    a charge for every selected itemset plus -log(1 - p) for every other
    filtered itemset.  Greedy and exact inference charge -log(p) per
    selected itemset; primal-dual inference charges the dual increase that
    made it tight.
    """

    @abstractmethod
    def infer(
        self,
        covering: Set[Itemset],
        itemsets: Mapping[Itemset, float],
        transaction: Transaction,
    ) -> float:
        """Add the selected itemsets to *covering* and return the total cost.

        Args:
            covering: Caller-owned set receiving the selection.  The cost only
                depends on the itemsets this call selects.
            itemsets: Candidate itemsets mapped to probabilities in (0, 1).
                Iteration order decides ties.
            transaction: The items to explain.

        Returns:
            The cost of the covering; ``math.inf`` when the algorithm could
            not find any admissible covering.
        """

    def cover(
        self,
        itemsets: Mapping[Itemset, float],
        transaction: Transaction,
    ) -> InferenceResult:
        """Run :meth:`infer` into a fresh covering and return both outputs."""
        covering: Set[Itemset] = set()
        cost = self.infer(covering, itemsets, transaction)
        return InferenceResult(covering=covering, cost=cost)
