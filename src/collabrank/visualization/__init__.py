"""Graph visualization."""

from collabrank.visualization.renderer import render_graph

__all__ = ["render_graph"]
