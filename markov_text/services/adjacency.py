"""
Weighted adjacency list for a single chain state.

Outgoing edges are appended in arrival order and only re-sorted lazily:
training can post thousands of weight increments before anything is read,
so every mutation just widens a "dirty" prefix and the next draw resolves it.

Resolution:
- Stable-sort the dirty prefix by descending weight
- Recompute cumulative weights (mass of all edges after each one),
  continuing from the untouched suffix
- Rebuild target -> position entries for the moved edges

Sampling draws ``r`` in ``[0, total)`` and binary-searches the cumulative
weights, which are non-increasing along the list, for the edge whose
bucket ``[cumulative, cumulative + weight)`` holds ``r``.
"""
from __future__ import annotations

import random
from bisect import bisect_left
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from markov_text.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class Edge:
    """A directed link to ``target`` carrying an accumulated weight."""
    target: int
    weight: int = 0
    # Sum of the weights of every edge after this one; valid only after a resolve
    cumulative: int = 0


def _negated_cumulative(edge: Edge) -> int:
    return -edge.cumulative


class WeightedAdjacency:
    """
    Outgoing edges of one state with O(log n) weighted sampling.

    Usage:
        adj = WeightedAdjacency()
        adj.add(3, 2)
        adj.add(5, 1)
        target = adj.draw(random.Random(0))  # 3 twice as often as 5
    """

    def __init__(self):
        self.edges: List[Edge] = []
        self._positions: Dict[int, int] = {}
        # Edges before this position may be out of order or carry stale cumulatives
        self._dirty = 0

    def __len__(self) -> int:
        return len(self.edges)

    @property
    def dirty_boundary(self) -> int:
        return self._dirty

    def add(self, target: int, weight: int):
        """
        Add ``max(0, weight)`` to the edge towards ``target``.

        Creates the edge when missing; never decreases an existing weight.
        """
        position = self._positions.get(target)
        if position is None:
            position = len(self.edges)
            self.edges.append(Edge(target))
            self._positions[target] = position

        self.edges[position].weight += max(0, weight)
        self._dirty = max(self._dirty, position + 1)

    def weight_of(self, target: int) -> int:
        """Current weight of the edge towards ``target`` (0 when absent)."""
        position = self._positions.get(target)
        if position is None:
            return 0
        return self.edges[position].weight

    def resolve(self):
        """Restore sorted order and cumulative weights over the dirty prefix."""
        boundary = self._dirty
        if boundary == 0:
            return

        self.edges[:boundary] = sorted(
            self.edges[:boundary], key=lambda e: e.weight, reverse=True
        )

        cumulative = 0
        if boundary < len(self.edges):
            after = self.edges[boundary]
            cumulative = after.cumulative + after.weight

        for position in range(boundary - 1, -1, -1):
            edge = self.edges[position]
            edge.cumulative = cumulative
            self._positions[edge.target] = position
            cumulative += edge.weight

        logger.debug("[CHAIN] Resorted %d of %d edges", boundary, len(self.edges))
        self._dirty = 0

    def total_weight(self) -> int:
        """Total weight mass of all edges."""
        if not self.edges:
            return 0
        self.resolve()
        head = self.edges[0]
        return head.cumulative + head.weight

    def draw(self, rng: random.Random) -> Optional[int]:
        """
        Pick a target with probability proportional to its weight.

        Returns:
            Target state index, or None when there is no weight to draw from
        """
        total = self.total_weight()
        if total <= 0:
            return None

        r = rng.randrange(total)
        # First edge whose cumulative mass is <= r; zero-weight edges have an
        # empty bucket and are always skipped by this rule.
        position = bisect_left(self.edges, -r, key=_negated_cumulative)
        return self.edges[position].target

    def items(self) -> List[Tuple[int, int]]:
        """``(target, weight)`` pairs in sampling order."""
        self.resolve()
        return [(edge.target, edge.weight) for edge in self.edges]
