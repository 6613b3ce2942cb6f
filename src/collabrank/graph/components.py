"""Connected-component counting, delegated to networkx."""

from __future__ import annotations

import networkx as nx

from collabrank.graph.builder import Graph


def count_connected_components(graph: Graph) -> int:
    """Return the number of connected components; isolated nodes count as one each."""
    if graph.node_count() == 0:
        return 0
    return nx.number_connected_components(graph.to_networkx())
