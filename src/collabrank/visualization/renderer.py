"""Render a collaboration graph to a PNG image."""

from __future__ import annotations

from pathlib import Path

import networkx as nx
from matplotlib.figure import Figure

from collabrank.config import get_logger
from collabrank.exceptions import RenderError
from collabrank.graph.builder import Graph

logger = get_logger(__name__)

DEFAULT_FILENAME = "network.png"
DEFAULT_SIZE = (1024, 768)
_DPI = 100
_LAYOUT_SEED = 42


def render_graph(
    graph: Graph,
    output_dir: str | Path,
    filename: str = DEFAULT_FILENAME,
    size: tuple[int, int] = DEFAULT_SIZE,
) -> Path:
    """Draw the graph's edges with a spring layout and save it as a PNG.

    Uses matplotlib's Agg canvas directly so no display backend is needed.

    Args:
        graph: Graph to draw
        output_dir: Directory to write into; created if missing
        filename: Image file name
        size: Image size in pixels as ``(width, height)``

    Returns:
        Path of the written image

    Raises:
        RenderError: If the directory or the image cannot be written
    """
    output_path = Path(output_dir) / filename
    width, height = size

    fig = Figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
    ax = fig.add_subplot(1, 1, 1)
    ax.set_title("Collaboration Network", fontsize=20)
    ax.set_axis_off()

    if graph.node_count():
        nx_graph = graph.to_networkx()
        pos = nx.spring_layout(nx_graph, seed=_LAYOUT_SEED)
        nx.draw_networkx_edges(nx_graph, pos, ax=ax, edge_color="black", width=0.5)
        nx.draw_networkx_nodes(nx_graph, pos, ax=ax, node_size=8, node_color="skyblue")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, format="png", facecolor="white")
    except OSError as e:
        raise RenderError(
            message=f"Failed to write graph image: {e}",
            hint="Check that the output directory is writable",
            details={"output_path": str(output_path)},
        ) from e

    logger.info(
        "Rendered graph image",
        path=str(output_path),
        nodes=graph.node_count(),
        edges=graph.edge_count(),
    )
    return output_path
