"""collabrank: centrality rankings for undirected collaboration graphs.

Loads a pairwise edge list, builds a deduplicated undirected graph and ranks
its nodes by degree, path-sum (a betweenness approximation) and eigenvector
centrality.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .analysis import (
    AnalysisReport,
    CentralityEngine,
    CentralityMetric,
    RankedEntry,
    analyze_graph,
    degree_centrality,
    eigenvector_centrality,
    path_sum_centrality,
    run_analysis,
    top_k,
)
from .config import CollabRankSettings, get_logger, get_settings
from .exceptions import CollabRankError, GraphLoadError
from .graph import Graph, GraphBuilder, build_graph, load_graph

__all__ = [
    "AnalysisReport",
    "CentralityEngine",
    "CentralityMetric",
    "CollabRankError",
    "CollabRankSettings",
    "Graph",
    "GraphBuilder",
    "GraphLoadError",
    "RankedEntry",
    "__version__",
    "analyze_graph",
    "build_graph",
    "degree_centrality",
    "eigenvector_centrality",
    "get_logger",
    "get_settings",
    "load_graph",
    "path_sum_centrality",
    "run_analysis",
    "top_k",
]
