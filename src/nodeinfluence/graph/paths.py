"""Single-source shortest-path engines.

Both engines return a dense distance vector indexed by node id, with
``UNREACHABLE`` for nodes that have no path from the source.
"""

from __future__ import annotations

import heapq
import math
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass

from nodeinfluence.core import get_logger
from nodeinfluence.graph.model import Graph

logger = get_logger(__name__)

UNREACHABLE = math.inf

Distances = list[float]


class PathEngine(ABC):
    """Interface for single-source shortest-path computation."""

    name: str = "abstract"

    @abstractmethod
    def distances(self, graph: Graph, source: int) -> Distances:
        """
        Compute shortest-path distances from source to every node.

        Returns:
            List of length graph.node_count; UNREACHABLE where no path exists.
        """
        raise NotImplementedError


class BreadthFirstEngine(PathEngine):
    """
    Hop-count distances via breadth-first search.

    Edge weights are ignored. Complexity: O(V + E).
    """

    name = "unweighted"

    def distances(self, graph: Graph, source: int) -> Distances:
        graph.check_node(source)

        dist: Distances = [UNREACHABLE] * graph.node_count
        dist[source] = 0
        queue = deque([source])

        while queue:
            current = queue.popleft()
            for neighbor, _ in graph.neighbors(current):
                if dist[neighbor] == UNREACHABLE:
                    dist[neighbor] = dist[current] + 1
                    queue.append(neighbor)

        return dist


@dataclass(frozen=True)
class DijkstraStats:
    """Heap instrumentation for a single Dijkstra run."""

    heap_pops: int
    heap_pushes: int
    edges_examined: int
    relaxed: int


class DijkstraEngine(PathEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    An improved distance pushes a fresh heap entry instead of decreasing the
    old one. Outdated entries are skipped when popped.

    Complexity:
        O((V + E) log V), plus one heap entry per successful relaxation.
    """

    name = "weighted"

    def distances(self, graph: Graph, source: int) -> Distances:
        dist, _ = self.shortest_path_costs(graph, source)
        return dist

    def shortest_path_costs(self, graph: Graph, source: int) -> tuple[Distances, DijkstraStats]:
        """
        Distances from source plus the heap counters of this run.

        Counters are local to the call, so one engine can serve several
        threads at once.
        """
        graph.check_node(source)

        edges_examined = 0
        relaxed = 0
        heap_pops = 0
        heap_pushes = 1

        dist: Distances = [UNREACHABLE] * graph.node_count
        dist[source] = 0.0
        pq = [(0.0, source)]  # priority queue of (distance, node)

        while pq:
            d_u, u = heapq.heappop(pq)
            heap_pops += 1

            # Skip outdated entries
            if d_u > dist[u]:
                continue

            for v, w in graph.neighbors(u):
                edges_examined += 1
                alt = d_u + w
                if alt < dist[v]:
                    dist[v] = alt
                    heapq.heappush(pq, (alt, v))
                    heap_pushes += 1
                    relaxed += 1

        stats = DijkstraStats(
            heap_pops=heap_pops,
            heap_pushes=heap_pushes,
            edges_examined=edges_examined,
            relaxed=relaxed,
        )
        logger.debug(
            f"Dijkstra from {source}: {stats.heap_pops} pops, "
            f"{stats.heap_pushes} pushes, {stats.edges_examined} edges examined, "
            f"{stats.relaxed} relaxed"
        )
        return dist, stats


def engine_for(graph: Graph) -> PathEngine:
    """Pick BFS for unit-weight graphs and Dijkstra otherwise."""
    if graph.is_weighted:
        return DijkstraEngine()
    return BreadthFirstEngine()


def compute_unweighted_distances(graph: Graph, source: int) -> Distances:
    """Hop-count distances from source (BFS)."""
    return BreadthFirstEngine().distances(graph, source)


def compute_weighted_distances(graph: Graph, source: int) -> Distances:
    """Weighted path costs from source (Dijkstra)."""
    return DijkstraEngine().distances(graph, source)
