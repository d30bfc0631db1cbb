"""Tests for the item/itemset incidence graph."""

from itemset_inference.cost_model import filter_itemsets
from itemset_inference.incidence import element_frequency, incidence_graph, uncoverable_items


class TestIncidenceGraph:
    def test_nodes_and_edges(self, instance_split):
        transaction, itemsets = instance_split
        filtered = filter_itemsets(itemsets, transaction)
        G = incidence_graph(filtered, transaction)

        assert G.number_of_nodes() == 3 + 3
        # {1,2} + {3} + {1,2,3}
        assert G.number_of_edges() == 2 + 1 + 3
        assert G.has_edge(("set", 0), ("item", 1))
        assert not G.has_edge(("set", 1), ("item", 1))
        assert G.nodes[("set", 2)]["itemset"] == frozenset([1, 2, 3])
        assert G.nodes[("set", 2)]["probability"] == 0.4

    def test_empty(self):
        G = incidence_graph({}, [])
        assert G.number_of_nodes() == 0


class TestElementFrequency:
    def test_split(self, instance_split):
        transaction, itemsets = instance_split
        filtered = filter_itemsets(itemsets, transaction)
        # items 1 and 2 are in {1,2} and {1,2,3}; item 3 in {3} and {1,2,3}
        assert element_frequency(filtered, transaction) == 2

    def test_singletons(self, instance_singletons):
        transaction, itemsets = instance_singletons
        filtered = filter_itemsets(itemsets, transaction)
        assert element_frequency(filtered, transaction) == 1

    def test_empty_transaction(self, instance_empty):
        transaction, itemsets = instance_empty
        assert element_frequency(filter_itemsets(itemsets, transaction), transaction) == 0


class TestUncoverableItems:
    def test_reports_missing_item(self, instance_uncoverable):
        transaction, itemsets = instance_uncoverable
        filtered = filter_itemsets(itemsets, transaction)
        assert uncoverable_items(filtered, transaction) == [3]

    def test_none_missing(self, instance_split):
        transaction, itemsets = instance_split
        filtered = filter_itemsets(itemsets, transaction)
        assert uncoverable_items(filtered, transaction) == []

    def test_empty_pool(self):
        assert uncoverable_items({}, [5, 6]) == [5, 6]
