"""Edge-list parsing and undirected edge deduplication.

Input lines hold two whitespace-separated non-negative integers. Anything
else (blank lines, ``#`` comments, wrong token counts, non-numeric tokens,
self-loops) is skipped without raising.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from collabrank.config import get_logger

logger = get_logger(__name__)

# ASCII digits only; int() alone would also accept "+5", "1_0" and "²"
_NODE_ID = re.compile(r"[0-9]+")

NormalizedEdge = tuple[int, int]


def normalize_edge(a: int, b: int) -> NormalizedEdge | None:
    """Return the canonical ``(min, max)`` form of an edge, or None for a self-loop."""
    if a == b:
        return None
    return (a, b) if a < b else (b, a)


def parse_edge_line(line: str) -> NormalizedEdge | None:
    """Parse one input line into a normalized edge.

    Args:
        line: Raw text line from the dataset

    Returns:
        Normalized ``(low, high)`` pair, or None if the line should be skipped
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    tokens = stripped.split()
    if len(tokens) != 2:
        return None
    if not all(_NODE_ID.fullmatch(token) for token in tokens):
        return None

    return normalize_edge(int(tokens[0]), int(tokens[1]))


def deduplicate_edges(lines: Iterable[str]) -> set[NormalizedEdge]:
    """Collect the set of distinct undirected edges from input lines.

    Args:
        lines: Raw text lines

    Returns:
        Set of normalized edges; repeated or reversed pairs collapse to one
    """
    edges: set[NormalizedEdge] = set()
    accepted = skipped = 0

    for line in lines:
        edge = parse_edge_line(line)
        if edge is None:
            skipped += 1
            continue
        accepted += 1
        edges.add(edge)

    logger.debug(
        "Deduplicated edge list",
        accepted_lines=accepted,
        skipped_lines=skipped,
        duplicate_lines=accepted - len(edges),
        unique_edges=len(edges),
    )
    return edges
