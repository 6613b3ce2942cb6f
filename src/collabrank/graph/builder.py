"""Graph construction from deduplicated edges.

Nodes get dense indices in order of first appearance. The mapping is kept
as an explicit two-way table (external ID to index, index to external ID)
that is frozen together with the graph.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import networkx as nx

from collabrank.config import get_logger
from collabrank.exceptions import GraphLoadError
from collabrank.graph.edges import NormalizedEdge, deduplicate_edges

logger = get_logger(__name__)


@dataclass(frozen=True)
class NodeTable:
    """Two-way mapping between external node IDs and dense indices."""

    external_ids: tuple[int, ...]
    index_by_id: Mapping[int, int]

    def __len__(self) -> int:
        return len(self.external_ids)

    def __contains__(self, external_id: object) -> bool:
        return external_id in self.index_by_id

    def index_of(self, external_id: int) -> int:
        """Return the dense index of an external ID.

        Raises:
            KeyError: If the ID is not part of the graph
        """
        return self.index_by_id[external_id]

    def external_id(self, index: int) -> int:
        """Return the external ID stored at a dense index."""
        return self.external_ids[index]


@dataclass(frozen=True)
class Graph:
    """Immutable undirected simple graph over dense node indices.

    Every node carries its external ID through ``table``. There is at most
    one edge per unordered pair and no self-loops.
    """

    table: NodeTable
    edge_pairs: tuple[tuple[int, int], ...]
    adjacency: tuple[tuple[int, ...], ...]

    def node_count(self) -> int:
        """Number of nodes."""
        return len(self.table)

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return len(self.edge_pairs)

    def nodes(self) -> Iterator[int]:
        """Iterate external node IDs in dense index order."""
        return iter(self.table.external_ids)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate edges as ``(external_u, external_v)`` pairs."""
        ids = self.table.external_ids
        for u, v in self.edge_pairs:
            yield ids[u], ids[v]

    def index_edges(self) -> Iterator[tuple[int, int]]:
        """Iterate edges as dense index pairs."""
        return iter(self.edge_pairs)

    def neighbors(self, index: int) -> tuple[int, ...]:
        """Dense indices adjacent to ``index``."""
        return self.adjacency[index]

    def degree(self, index: int) -> int:
        """Number of edges incident to ``index``."""
        return len(self.adjacency[index])

    def external_id(self, index: int) -> int:
        """External ID of the node at ``index``."""
        return self.table.external_id(index)

    def to_networkx(self) -> nx.Graph:
        """Build an equivalent networkx graph labelled by external ID.

        Isolated nodes are kept so component counts stay correct.
        """
        nx_graph = nx.Graph()
        nx_graph.add_nodes_from(self.table.external_ids)
        nx_graph.add_edges_from(self.edges())
        return nx_graph


class GraphBuilder:
    """Assign dense indices on first sight and accumulate edges.

    A builder produces exactly one graph; ``build()`` seals it.
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._index_by_id: dict[int, int] = {}
        self._external_ids: list[int] = []
        self._edges: list[tuple[int, int]] = []
        self._seen: set[tuple[int, int]] = set()
        self._built = False

    def _resolve(self, external_id: int) -> int:
        index = self._index_by_id.get(external_id)
        if index is None:
            index = len(self._external_ids)
            self._index_by_id[external_id] = index
            self._external_ids.append(external_id)
        return index

    def add_node(self, external_id: int) -> int:
        """Register a node without edges and return its dense index."""
        self._check_open()
        return self._resolve(external_id)

    def add_edge(self, u: int, v: int) -> bool:
        """Add an undirected edge between two external IDs.

        Self-loops and repeated pairs are ignored so the graph stays simple.

        Returns:
            True if a new edge was added
        """
        self._check_open()
        if u == v:
            return False
        iu = self._resolve(u)
        iv = self._resolve(v)
        key = (iu, iv) if iu < iv else (iv, iu)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._edges.append(key)
        return True

    def build(self) -> Graph:
        """Freeze the collected nodes and edges into a Graph."""
        self._check_open()
        self._built = True

        neighbors: list[list[int]] = [[] for _ in self._external_ids]
        for u, v in self._edges:
            neighbors[u].append(v)
            neighbors[v].append(u)

        return Graph(
            table=NodeTable(
                external_ids=tuple(self._external_ids),
                index_by_id=MappingProxyType(dict(self._index_by_id)),
            ),
            edge_pairs=tuple(self._edges),
            adjacency=tuple(tuple(adj) for adj in neighbors),
        )

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("GraphBuilder.build() has already been called")


def build_graph(edges: Iterable[NormalizedEdge]) -> Graph:
    """Build a graph from an iterable of edges."""
    builder = GraphBuilder()
    for u, v in edges:
        builder.add_edge(u, v)
    return builder.build()


def load_graph(path: str | Path) -> Graph:
    """Load an edge-list file into a Graph.

    The whole file is read before construction starts. Malformed lines are
    dropped; only failing to open or read the file is an error.

    Args:
        path: Path to the edge-list dataset

    Returns:
        The built graph

    Raises:
        GraphLoadError: If the file cannot be opened or read
    """
    path = Path(path)
    try:
        # Only "\n" ends a line, unlike str.splitlines()
        with path.open(encoding="utf-8", errors="replace", newline="") as f:
            lines = f.read().split("\n")
    except OSError as e:
        logger.error("Failed to read dataset", path=str(path), error=str(e))
        raise GraphLoadError(
            path, reason=e.strerror or str(e), original_error=e
        ) from e

    graph = build_graph(deduplicate_edges(lines))
    logger.info(
        "Graph loaded",
        path=str(path),
        nodes=graph.node_count(),
        edges=graph.edge_count(),
    )
    return graph
