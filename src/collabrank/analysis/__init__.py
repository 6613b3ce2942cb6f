"""Centrality analysis and ranking."""

from collabrank.analysis.centrality import (
    CentralityEngine,
    CentralityMetric,
    CentralityResult,
    degree_centrality,
    eigenvector_centrality,
    path_sum_centrality,
    scale_for_display,
)
from collabrank.analysis.ranking import RankedEntry, top_k
from collabrank.analysis.report import AnalysisReport, analyze_graph, run_analysis

__all__ = [
    "AnalysisReport",
    "CentralityEngine",
    "CentralityMetric",
    "CentralityResult",
    "RankedEntry",
    "analyze_graph",
    "degree_centrality",
    "eigenvector_centrality",
    "path_sum_centrality",
    "run_analysis",
    "scale_for_display",
    "top_k",
]
