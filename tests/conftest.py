"""Shared test fixtures for itemset-inference."""

import pytest

from itemset_inference.instances import (
    scenario_split,
    foreign_itemset,
    empty_transaction,
    uncoverable_item,
    singletons,
    greedy_trap,
    TEST_INSTANCES,
)


@pytest.fixture
def instance_split():
    """{1,2}:0.9, {3}:0.8, {1,2,3}:0.4 over transaction [1, 2, 3]."""
    return scenario_split()


@pytest.fixture
def instance_foreign():
    return foreign_itemset()


@pytest.fixture
def instance_empty():
    return empty_transaction()


@pytest.fixture
def instance_uncoverable():
    return uncoverable_item()


@pytest.fixture
def instance_singletons():
    return singletons()


@pytest.fixture
def instance_trap():
    return greedy_trap()


@pytest.fixture(params=list(TEST_INSTANCES.keys()))
def named_instance(request):
    """Parametrized fixture yielding (name, transaction, itemsets)."""
    name = request.param
    transaction, itemsets = TEST_INSTANCES[name]()
    return name, transaction, itemsets
