"""Centrality computations over an immutable collaboration graph.

Three metrics are provided, each keyed by external node ID:

* degree: number of incident edges.
* path-sum: total unit-weight shortest-path distance from a node to every
  node it can reach. This is a cheap stand-in reported under the
  "betweenness" heading; it is NOT betweenness centrality (which counts
  shortest paths passing through a node) and behaves more like an inverse
  closeness score.
* eigenvector: power iteration with synchronous updates and L2
  normalization after every step.

None of the computations mutate the graph, so they can run concurrently
over the same instance.
"""

from __future__ import annotations

import time
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from collabrank.config import CollabRankSettings, get_logger
from collabrank.graph.builder import Graph

logger = get_logger(__name__)

DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-6
DEFAULT_DISPLAY_SCALE = 1_000_000


class CentralityMetric(str, Enum):
    """Supported centrality metrics."""

    DEGREE = "degree"
    PATH_SUM = "path_sum"
    EIGENVECTOR = "eigenvector"

    @property
    def label(self) -> str:
        """Human-readable heading used in reports."""
        return _METRIC_LABELS[self]


_METRIC_LABELS = {
    CentralityMetric.DEGREE: "degree",
    CentralityMetric.PATH_SUM: "betweenness (path-sum approximation)",
    CentralityMetric.EIGENVECTOR: "eigenvector",
}


@dataclass(frozen=True)
class CentralityResult:
    """Scores for one metric plus timing."""

    metric: CentralityMetric
    scores: dict[int, float] | dict[int, int] = field(default_factory=dict)
    calculation_time: float = 0.0

    @property
    def node_count(self) -> int:
        return len(self.scores)


def degree_centrality(graph: Graph) -> dict[int, int]:
    """Count incident edges per node."""
    return {
        graph.external_id(index): graph.degree(index)
        for index in range(graph.node_count())
    }


def _bfs_distance_sum(graph: Graph, source: int) -> int:
    """Sum of hop distances from ``source`` to every reachable node."""
    distances = {source: 0}
    queue = deque([source])
    total = 0
    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1
        for neighbor in graph.neighbors(current):
            if neighbor not in distances:
                distances[neighbor] = next_distance
                total += next_distance
                queue.append(neighbor)
    return total


def path_sum_centrality(graph: Graph) -> dict[int, int]:
    """Total shortest-path distance from each node to all nodes it reaches.

    All edges weigh 1, so a breadth-first search per node gives the same
    distances as Dijkstra. Unreachable nodes add nothing; the source itself
    contributes distance 0.

    Note:
        Reported as a betweenness approximation. Lower values mean a node is
        closer to the rest of its component.
    """
    return {
        graph.external_id(index): _bfs_distance_sum(graph, index)
        for index in range(graph.node_count())
    }


def eigenvector_centrality(
    graph: Graph,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> dict[int, float]:
    """Approximate eigenvector centrality by power iteration.

    Every node starts at 1.0. Each iteration sets a node's next value to the
    sum of its neighbors' current values, then scales the whole vector to
    unit Euclidean norm. Two buffers are swapped between iterations so the
    vector being read is never written mid-step. Iteration stops once the
    largest absolute change drops below ``tolerance``, keeping the values
    from before that final step, or after ``max_iterations`` steps, keeping
    the last iterate.

    A zero norm (no edges at all) leaves the vector at zero instead of
    producing NaN.

    Args:
        graph: Graph to score
        max_iterations: Iteration cap
        tolerance: Convergence threshold on the max absolute change

    Returns:
        Mapping of external ID to unit-norm score
    """
    n = graph.node_count()
    if n == 0:
        return {}

    pairs = np.asarray(graph.edge_pairs, dtype=np.intp).reshape(-1, 2)
    # Each undirected edge contributes in both directions
    targets = np.concatenate([pairs[:, 0], pairs[:, 1]])
    sources = np.concatenate([pairs[:, 1], pairs[:, 0]])

    current = np.ones(n, dtype=np.float64)
    following = np.empty(n, dtype=np.float64)

    iterations = 0
    converged = False
    for iterations in range(1, max_iterations + 1):
        following.fill(0.0)
        np.add.at(following, targets, current[sources])

        norm = float(np.sqrt(np.dot(following, following)))
        if norm > 0.0:
            following /= norm
        else:
            logger.debug("Zero-norm eigenvector iterate, using zero vector")
            following.fill(0.0)

        delta = float(np.max(np.abs(current - following)))
        if delta < tolerance:
            converged = True
            break
        current, following = following, current

    logger.debug(
        "Eigenvector power iteration finished",
        iterations=iterations,
        converged=converged,
        nodes=n,
    )
    return {
        graph.external_id(index): float(value) for index, value in enumerate(current)
    }


def scale_for_display(
    scores: dict[int, float], factor: int = DEFAULT_DISPLAY_SCALE
) -> dict[int, int]:
    """Multiply scores by ``factor`` and truncate to integers for display."""
    return {node_id: int(value * factor) for node_id, value in scores.items()}


class CentralityEngine:
    """Run the centrality metrics with settings-driven parameters."""

    def __init__(self, settings: CollabRankSettings | None = None) -> None:
        """Initialize the engine.

        Args:
            settings: Settings for iteration limits and parallelism;
                falls back to the global settings
        """
        if settings is None:
            from collabrank.config import get_settings

            settings = get_settings()
        self.settings = settings

    def compute(self, graph: Graph, metric: CentralityMetric) -> CentralityResult:
        """Compute a single metric.

        Args:
            graph: Graph to score
            metric: Metric to compute

        Returns:
            CentralityResult with scores keyed by external ID
        """
        start_time = time.perf_counter()

        scores: dict[int, int] | dict[int, float]
        if metric == CentralityMetric.DEGREE:
            scores = degree_centrality(graph)
        elif metric == CentralityMetric.PATH_SUM:
            scores = path_sum_centrality(graph)
        elif metric == CentralityMetric.EIGENVECTOR:
            scores = eigenvector_centrality(
                graph,
                max_iterations=self.settings.eigenvector_max_iterations,
                tolerance=self.settings.eigenvector_tolerance,
            )
        else:
            raise ValueError(f"Unknown centrality metric: {metric}")

        elapsed = time.perf_counter() - start_time
        logger.info(
            "Computed centrality",
            metric=metric.value,
            nodes=len(scores),
            seconds=round(elapsed, 4),
        )
        return CentralityResult(metric=metric, scores=scores, calculation_time=elapsed)

    def compute_all(self, graph: Graph) -> dict[CentralityMetric, CentralityResult]:
        """Compute every metric, on worker threads if configured.

        Returns:
            Results keyed by metric, in ``CentralityMetric`` order
        """
        metrics = list(CentralityMetric)
        if not self.settings.parallel_metrics:
            return {metric: self.compute(graph, metric) for metric in metrics}

        with ThreadPoolExecutor(max_workers=len(metrics)) as executor:
            futures = {
                metric: executor.submit(self.compute, graph, metric)
                for metric in metrics
            }
            return {metric: futures[metric].result() for metric in metrics}
