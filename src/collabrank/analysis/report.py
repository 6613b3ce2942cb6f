"""Assemble the full analysis report for a graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from collabrank.analysis.centrality import (
    CentralityEngine,
    CentralityMetric,
    CentralityResult,
    scale_for_display,
)
from collabrank.analysis.ranking import RankedEntry, top_k
from collabrank.config import CollabRankSettings, get_logger, get_settings
from collabrank.graph.builder import Graph, load_graph
from collabrank.graph.components import count_connected_components

logger = get_logger(__name__)


@dataclass
class AnalysisReport:
    """Counts plus the per-metric top-K rankings for one graph."""

    node_count: int
    edge_count: int
    component_count: int
    rankings: dict[CentralityMetric, list[RankedEntry]] = field(default_factory=dict)
    results: dict[CentralityMetric, CentralityResult] = field(
        default_factory=dict, repr=False
    )
    source: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary.

        Raw score mappings are left out; only the rankings are included.
        """
        return {
            "source": str(self.source) if self.source else None,
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "component_count": self.component_count,
            "rankings": {
                metric.value: [entry.to_dict() for entry in entries]
                for metric, entries in self.rankings.items()
            },
        }


def analyze_graph(
    graph: Graph, settings: CollabRankSettings | None = None
) -> AnalysisReport:
    """Compute counts, components, all centralities and their rankings.

    Eigenvector scores are ranked on their display-scaled integer form; the
    unit-norm floats stay available in ``AnalysisReport.results``.

    Args:
        graph: Graph to analyze
        settings: Settings to use; defaults to the global settings

    Returns:
        The assembled report
    """
    settings = settings or get_settings()
    engine = CentralityEngine(settings)

    results = engine.compute_all(graph)

    rankings: dict[CentralityMetric, list[RankedEntry]] = {}
    for metric, result in results.items():
        scores = result.scores
        if metric == CentralityMetric.EIGENVECTOR:
            scores = scale_for_display(
                result.scores, settings.eigenvector_display_scale
            )
        rankings[metric] = top_k(scores, settings.top_k)

    report = AnalysisReport(
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        component_count=count_connected_components(graph),
        rankings=rankings,
        results=results,
    )
    logger.info(
        "Analysis complete",
        nodes=report.node_count,
        edges=report.edge_count,
        components=report.component_count,
    )
    return report


def run_analysis(
    path: str | Path, settings: CollabRankSettings | None = None
) -> AnalysisReport:
    """Load a dataset and analyze it.

    Raises:
        GraphLoadError: If the dataset cannot be read
    """
    graph = load_graph(path)
    report = analyze_graph(graph, settings)
    report.source = Path(path)
    return report
