"""Edge ingestion and graph construction."""

from collabrank.graph.builder import (
    Graph,
    GraphBuilder,
    NodeTable,
    build_graph,
    load_graph,
)
from collabrank.graph.components import count_connected_components
from collabrank.graph.edges import deduplicate_edges, normalize_edge, parse_edge_line

__all__ = [
    "Graph",
    "GraphBuilder",
    "NodeTable",
    "build_graph",
    "count_connected_components",
    "deduplicate_edges",
    "load_graph",
    "normalize_edge",
    "parse_edge_line",
]
