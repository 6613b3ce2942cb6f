"""Top-K ranking of centrality scores."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from collabrank.exceptions import ValidationError

DEFAULT_TOP_K = 10


@dataclass(frozen=True)
class RankedEntry:
    """A node and its score in a ranking."""

    node_id: int
    score: float

    def to_dict(self) -> dict[str, float]:
        """Convert entry to dictionary representation."""
        return {"node_id": self.node_id, "score": self.score}


def top_k(scores: Mapping[int, float], k: int = DEFAULT_TOP_K) -> list[RankedEntry]:
    """Return the ``k`` highest-scoring nodes in descending score order.

    Equal scores are ordered by ascending node ID so output is reproducible;
    callers should not rely on that order.

    Args:
        scores: Mapping of node ID to score
        k: Maximum number of entries to return

    Returns:
        Up to ``k`` ranked entries

    Raises:
        ValidationError: If ``k`` is negative
    """
    if k < 0:
        raise ValidationError(
            message=f"Ranking size must be non-negative, got {k}",
            details={"k": k},
        )
    ordered = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return [RankedEntry(node_id=node_id, score=score) for node_id, score in ordered[:k]]
