"""Item/itemset incidence graph of a covering problem."""

from typing import List, Mapping

import networkx as nx

from .cost_model import Item, Itemset, Transaction


def incidence_graph(
    filtered: Mapping[Itemset, float],
    transaction: Transaction,
) -> nx.Graph:
    """Bipartite graph linking each transaction item to the itemsets containing it.

    Item nodes are ``("item", i)``; itemset nodes are ``("set", k)`` where k is
    the itemset's position in *filtered*.  Itemset nodes carry the itemset and
    its probability as node attributes.
    """
    G = nx.Graph()
    G.add_nodes_from((("item", item) for item in transaction), bipartite=0)
    for k, (itemset, p) in enumerate(filtered.items()):
        G.add_node(("set", k), bipartite=1, itemset=itemset, probability=p)
        for item in itemset:
            G.add_edge(("set", k), ("item", item))
    return G


def element_frequency(
    filtered: Mapping[Itemset, float],
    transaction: Transaction,
) -> int:
    """Largest number of filtered itemsets containing a single transaction item.

    This is the factor f of the primal-dual f-approximation.
    """
    G = incidence_graph(filtered, transaction)
    return max((G.degree(("item", item)) for item in transaction), default=0)


def uncoverable_items(
    filtered: Mapping[Itemset, float],
    transaction: Transaction,
) -> List[Item]:
    """Transaction items that no filtered itemset contains, in transaction order."""
    G = incidence_graph(filtered, transaction)
    return [item for item in transaction if G.degree(("item", item)) == 0]
