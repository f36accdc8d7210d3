"""Undirected multigraph over dense integer node ids.

Nodes are the integers ``0 .. node_count - 1``. Each node owns an ordered
adjacency list of ``(neighbor, weight)`` pairs; insertion order is preserved
and drives traversal order in the path engines.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import networkx as nx

from nodeinfluence.core import GraphError, NegativeWeightError, NodeOutOfRangeError

Adjacency = tuple[tuple[int, float], ...]


class Graph:
    """Fixed-size, undirected, weighted multigraph."""

    def __init__(self, node_count: int) -> None:
        """Create a graph with no edges.

        Args:
            node_count: Number of nodes, at least 1.

        Raises:
            GraphError: If node_count is not a positive integer.
        """
        if isinstance(node_count, bool) or not isinstance(node_count, int):
            raise GraphError(f"node_count must be an int, got {type(node_count).__name__}")
        if node_count < 1:
            raise GraphError("A graph needs at least one node", node_count=node_count)

        self._node_count = node_count
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(node_count)]
        self._edges: list[tuple[int, int, float]] = []

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def edge_count(self) -> int:
        """Number of inserted edges, parallel edges and self loops included."""
        return len(self._edges)

    @property
    def is_weighted(self) -> bool:
        """True when any edge carries a weight other than 1.0."""
        return any(weight != 1.0 for _, _, weight in self._edges)

    def __len__(self) -> int:
        return self._node_count

    def __repr__(self) -> str:
        return f"Graph(node_count={self._node_count}, edge_count={self.edge_count})"

    def check_node(self, node: int) -> None:
        """Raise NodeOutOfRangeError unless node is a valid id."""
        if isinstance(node, bool) or not isinstance(node, int):
            raise NodeOutOfRangeError(node, self._node_count)
        if not 0 <= node < self._node_count:
            raise NodeOutOfRangeError(node, self._node_count)

    def add_edge(self, u: int, v: int, weight: float = 1.0) -> None:
        """Insert the undirected edge u - v.

        (v, weight) is appended to u's adjacency, then (u, weight) to v's.
        Repeated pairs become parallel edges; a self loop lists the node as
        its own neighbor twice.

        Raises:
            NodeOutOfRangeError: If u or v is not a valid node id.
            NegativeWeightError: If weight is negative, NaN or infinite.
        """
        self.check_node(u)
        self.check_node(v)
        weight = float(weight)
        if not math.isfinite(weight) or weight < 0:
            raise NegativeWeightError(u, v, weight, self._node_count)

        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))
        self._edges.append((u, v, weight))

    def neighbors(self, node: int) -> Adjacency:
        """Adjacency of node in insertion order."""
        self.check_node(node)
        return tuple(self._adjacency[node])

    def nodes(self) -> range:
        return range(self._node_count)

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield each inserted edge once, in insertion order."""
        yield from self._edges

    def to_networkx(self) -> nx.MultiGraph:
        """Build an equivalent NetworkX MultiGraph.

        Parallel edges survive as separate keys; weights are stored under the
        ``weight`` attribute.
        """
        graph = nx.MultiGraph()
        graph.add_nodes_from(self.nodes())
        for u, v, weight in self._edges:
            graph.add_edge(u, v, weight=weight)
        return graph
