"""Closeness-centrality influence scoring."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from nodeinfluence.core import (
    DegenerateGraphError,
    GraphError,
    NodeOutOfRangeError,
    get_logger,
)
from nodeinfluence.graph.model import Graph
from nodeinfluence.graph.paths import (
    UNREACHABLE,
    BreadthFirstEngine,
    DijkstraEngine,
    PathEngine,
    engine_for,
)

logger = get_logger(__name__)


def influence_score(distances: Sequence[float], node_count: int, target: int) -> float:
    """Reduce a distance vector rooted at target to its closeness score.

    Formula: score = (node_count - 1) / sum(distances to every other node)

    A target that cannot reach some other node scores 0.

    Args:
        distances: Distance vector whose source is target.
        node_count: Number of nodes in the graph.
        target: Node the vector was computed from.

    Returns:
        Non-negative closeness score, ``inf`` when every peer is reached at
        zero cost.

    Raises:
        NodeOutOfRangeError: If target is not a valid node id.
        GraphError: If the vector length does not match node_count.
        DegenerateGraphError: If the graph has a single node.
    """
    if isinstance(target, bool) or not isinstance(target, int) or not 0 <= target < node_count:
        raise NodeOutOfRangeError(target, node_count)
    if len(distances) != node_count:
        raise GraphError(
            f"Distance vector has {len(distances)} entries, expected {node_count}",
            node_count=node_count,
        )

    total = 0.0
    for node, distance in enumerate(distances):
        if node == target:
            continue
        if distance == UNREACHABLE:
            return 0.0
        total += distance

    if node_count == 1:
        raise DegenerateGraphError()
    # Every peer sits behind zero-weight edges.
    if total == 0:
        return math.inf

    return (node_count - 1) / total


@dataclass(frozen=True)
class InfluenceResult:
    """Influence score for a single node."""

    node: int
    label: str
    score: float
    reachable_count: int
    total_distance: float

    @property
    def is_connected(self) -> bool:
        """True when the node reaches every other node."""
        return self.score > 0.0


class InfluenceScoreCalculator:
    """Compute closeness-centrality influence scores for graph nodes."""

    def __init__(self, weighted: bool | None = None) -> None:
        """Initialize influence calculator.

        Args:
            weighted: True forces Dijkstra, False forces BFS, None picks the
                engine from the graph's edge weights.
        """
        self._weighted = weighted

    def engine(self, graph: Graph) -> PathEngine:
        if self._weighted is None:
            return engine_for(graph)
        return DijkstraEngine() if self._weighted else BreadthFirstEngine()

    def score(self, graph: Graph, target: int) -> float:
        """Influence score of a single node."""
        distances = self.engine(graph).distances(graph, target)
        return influence_score(distances, graph.node_count, target)

    def compute(
        self,
        graph: Graph,
        labels: Sequence[str] | None = None,
    ) -> dict[int, InfluenceResult]:
        """Compute influence for every node in the graph.

        Args:
            graph: Graph to score.
            labels: Optional display label per node id.

        Returns:
            Dictionary mapping node id to InfluenceResult.

        Raises:
            DegenerateGraphError: If the graph has a single node.
            GraphError: If labels does not cover every node.
        """
        if labels is not None and len(labels) != graph.node_count:
            raise GraphError(
                f"Got {len(labels)} labels for {graph.node_count} nodes",
                node_count=graph.node_count,
                edge_count=graph.edge_count,
            )
        if graph.node_count == 1:
            logger.warning("Single-node graph provided for influence computation")
            raise DegenerateGraphError()

        engine = self.engine(graph)
        results: dict[int, InfluenceResult] = {}
        for node in graph.nodes():
            distances = engine.distances(graph, node)
            reachable = [d for i, d in enumerate(distances) if i != node and d != UNREACHABLE]
            results[node] = InfluenceResult(
                node=node,
                label=labels[node] if labels is not None else str(node),
                score=influence_score(distances, graph.node_count, node),
                reachable_count=len(reachable),
                total_distance=float(sum(reachable)),
            )

        logger.info(
            f"Computed {engine.name} influence for {len(results)} nodes "
            f"over {graph.edge_count} edges"
        )
        return results

    def get_top_k(
        self,
        results: dict[int, InfluenceResult],
        k: int = 10,
    ) -> list[InfluenceResult]:
        """Get top k nodes by influence score.

        Ties keep node id order.
        """
        sorted_results = sorted(
            results.values(),
            key=lambda r: (-r.score, r.node),
        )
        return sorted_results[:k]
