"""Tests for the exact ILP covering algorithm."""

import logging
import math
from itertools import chain, combinations
from unittest.mock import patch

import numpy as np
import pytest

from itemset_inference.cost_model import covering_cost, filter_itemsets, off_cost, on_cost
from itemset_inference.covering_program import CoveringSolver, HighsCoveringSolver
from itemset_inference.inference.exact import ExactCover
from itemset_inference.instances import KNOWN_OPTIMAL, random_instance
from itemset_inference.timing import SolverTimer
from itemset_inference.validation import verify_covering


def _brute_force_optimum(itemsets, transaction):
    """Cheapest complete covering by enumeration (small pools only)."""
    filtered = filter_itemsets(itemsets, transaction)
    candidates = list(filtered)
    best = math.inf
    subsets = chain.from_iterable(
        combinations(candidates, r) for r in range(len(candidates) + 1)
    )
    for subset in subsets:
        covered = set().union(*subset) if subset else set()
        if set(transaction) <= covered:
            best = min(best, covering_cost(set(subset), filtered))
    return best


class _NoSolutionSolver(CoveringSolver):
    def solve(self, program):
        return None


class _FixedSolver(CoveringSolver):
    """Returns a preset, slightly fractional assignment."""

    def __init__(self, values):
        self.values = values

    def solve(self, program):
        return np.array(self.values)


class TestExactCover:
    def setup_method(self):
        self.algorithm = ExactCover()

    def test_split(self, instance_split):
        transaction, itemsets = instance_split
        covering = set()
        cost = self.algorithm.infer(covering, itemsets, transaction)
        assert covering == {frozenset([1, 2]), frozenset([3])}
        assert cost == pytest.approx(on_cost(0.9) + on_cost(0.8) + off_cost(0.4))

    def test_beats_greedy_trap(self, instance_trap):
        transaction, itemsets = instance_trap
        result = self.algorithm.cover(itemsets, transaction)
        assert result.covering == {frozenset([1, 2]), frozenset([3, 4])}
        assert result.cost == pytest.approx(KNOWN_OPTIMAL["greedy_trap"])

    def test_known_optima(self, named_instance):
        name, transaction, itemsets = named_instance
        result = self.algorithm.cover(itemsets, transaction)
        if name in KNOWN_OPTIMAL:
            assert result.cost == pytest.approx(KNOWN_OPTIMAL[name])
            assert verify_covering(result.covering, itemsets, transaction)
        else:
            assert math.isinf(result.cost)

    def test_uncoverable_item_is_infinite(self, instance_uncoverable):
        transaction, itemsets = instance_uncoverable
        covering = set()
        cost = self.algorithm.infer(covering, itemsets, transaction)
        assert cost == math.inf
        assert covering == set()

    def test_empty_pool_nonempty_transaction(self):
        result = self.algorithm.cover({}, [1])
        assert result.cost == math.inf

    def test_empty_transaction(self, instance_empty):
        transaction, itemsets = instance_empty
        result = self.algorithm.cover(itemsets, transaction)
        assert result.covering == set()
        assert result.cost == 0.0

    def test_empty_itemset_selected_when_likely(self):
        """With nothing to cover, an itemset is selected iff p > 0.5."""
        result = self.algorithm.cover({frozenset(): 0.8}, [])
        assert result.covering == {frozenset()}
        assert result.cost == pytest.approx(on_cost(0.8))

        result = self.algorithm.cover({frozenset(): 0.2}, [])
        assert result.covering == set()
        assert result.cost == pytest.approx(off_cost(0.2))

    def test_selects_likely_redundant_itemsets(self):
        """Itemsets with p > 0.5 lower the cost even when their items are covered."""
        transaction = [1, 2]
        itemsets = {frozenset([1, 2]): 0.9, frozenset([1]): 0.7}
        result = self.algorithm.cover(itemsets, transaction)
        assert result.covering == {frozenset([1, 2]), frozenset([1])}
        assert result.cost == pytest.approx(on_cost(0.9) + on_cost(0.7))

    def test_matches_brute_force(self):
        for seed in range(8):
            transaction, itemsets = random_instance(6, 8, seed=seed)
            result = self.algorithm.cover(itemsets, transaction)
            assert verify_covering(result.covering, itemsets, transaction)
            assert result.cost == pytest.approx(_brute_force_optimum(itemsets, transaction))

    def test_no_worse_than_approximations(self):
        from itemset_inference.inference import GreedyCover, PrimalDualCover

        for seed in range(5):
            transaction, itemsets = random_instance(12, 30, seed=seed)
            exact = self.algorithm.cover(itemsets, transaction).cost
            assert exact <= GreedyCover().cover(itemsets, transaction).cost + 1e-9
            pd = PrimalDualCover(seed=seed).cover(itemsets, transaction)
            filtered = filter_itemsets(itemsets, transaction)
            assert exact <= covering_cost(pd.covering, filtered) + 1e-9

    def test_uncoverable_items_only_computed_for_debug(self, instance_uncoverable, caplog):
        transaction, itemsets = instance_uncoverable
        target = "itemset_inference.inference.exact.uncoverable_items"

        caplog.set_level(logging.INFO, logger="itemset_inference.inference.exact")
        with patch(target) as mock_uncoverable:
            assert self.algorithm.cover(itemsets, transaction).cost == math.inf
        mock_uncoverable.assert_not_called()

        caplog.set_level(logging.DEBUG, logger="itemset_inference.inference.exact")
        with patch(target, return_value=[3]) as mock_uncoverable:
            assert self.algorithm.cover(itemsets, transaction).cost == math.inf
        mock_uncoverable.assert_called_once()
        assert "uncoverable items: [3]" in caplog.text

    def test_solver_without_solution(self, instance_split):
        transaction, itemsets = instance_split
        covering = set()
        cost = ExactCover(solver=_NoSolutionSolver()).infer(covering, itemsets, transaction)
        assert cost == math.inf
        assert covering == set()

    def test_solution_values_are_rounded(self, instance_split):
        transaction, itemsets = instance_split
        algorithm = ExactCover(solver=_FixedSolver([0.9999999, 1.0000001, 1e-8]))
        result = algorithm.cover(itemsets, transaction)
        assert result.covering == {frozenset([1, 2]), frozenset([3])}

    def test_solver_by_name(self):
        algorithm = ExactCover(solver="highs", time_limit=30)
        assert isinstance(algorithm.solver, HighsCoveringSolver)
        assert algorithm.solver.time_limit == 30

    def test_unknown_solver_raises(self):
        with pytest.raises(ValueError, match="Unknown ILP solver"):
            ExactCover(solver="cplex")

    def test_timer_through_algorithm(self, instance_split, instance_uncoverable):
        timer = SolverTimer()
        algorithm = ExactCover(solver=HighsCoveringSolver(timer=timer))
        for transaction, itemsets in (instance_split, instance_uncoverable):
            algorithm.cover(itemsets, transaction)
        assert timer.num_calls == 2
        assert timer.num_infeasible == 1
