"""Build index-based graphs from labelled edges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import networkx as nx

from nodeinfluence.core import DatasetError, GraphError, get_logger
from nodeinfluence.graph.model import Graph

logger = get_logger(__name__)

LabeledEdge = tuple[str, str] | tuple[str, str, float]


@dataclass(frozen=True)
class LabeledGraph:
    """A Graph plus the label of each of its node ids."""

    name: str
    graph: Graph
    labels: tuple[str, ...]
    index_of: dict[str, int] = field(repr=False)

    def node(self, label: str) -> int:
        """Resolve a label to its node id.

        Raises:
            DatasetError: If the label is unknown.
        """
        try:
            return self.index_of[label]
        except KeyError:
            raise DatasetError(f"Unknown node label: {label}", dataset=self.name, label=label) from None

    def adjacency_rows(self) -> list[tuple[str, list[str]]]:
        """Adjacency list rendered as ``("Name", ["Other (1.0)", ...])`` rows."""
        return [
            (
                self.labels[node],
                [f"{self.labels[neighbor]} ({weight:g})" for neighbor, weight in self.graph.neighbors(node)],
            )
            for node in self.graph.nodes()
        ]


class GraphBuilder:
    """Build a LabeledGraph from label pairs."""

    def __init__(self, name: str = "graph") -> None:
        """Initialize graph builder.

        Args:
            name: Name reported in logs and errors.
        """
        self._name = name

    def build(
        self,
        labels: Sequence[str],
        edges: Iterable[LabeledEdge],
    ) -> LabeledGraph:
        """Build a graph whose node ids follow the order of labels.

        Args:
            labels: Node labels; position is the node id.
            edges: (u, v) or (u, v, weight) label tuples.

        Returns:
            LabeledGraph with every edge inserted in iteration order.

        Raises:
            DatasetError: If labels repeat or an edge names an unknown label.
            GraphError: If graph construction fails.
        """
        index_of: dict[str, int] = {}
        for label in labels:
            if label in index_of:
                raise DatasetError(f"Duplicate node label: {label}", dataset=self._name, label=label)
            index_of[label] = len(index_of)

        graph = Graph(len(index_of))
        result = LabeledGraph(
            name=self._name,
            graph=graph,
            labels=tuple(labels),
            index_of=index_of,
        )

        for edge in edges:
            u, v = result.node(edge[0]), result.node(edge[1])
            if len(edge) == 3:
                graph.add_edge(u, v, edge[2])
            else:
                graph.add_edge(u, v)

        logger.info(
            f"Built {self._name} graph with {graph.node_count} nodes "
            f"and {graph.edge_count} edges"
        )
        return result

    def from_networkx(self, source: nx.Graph, weight: str = "weight") -> LabeledGraph:
        """Convert an undirected NetworkX graph.

        Node labels are ``str(node)`` in the graph's node order. Edges lacking
        the weight attribute get weight 1.0.

        Raises:
            GraphError: If source is directed.
        """
        if source.is_directed():
            raise GraphError(
                "Directed graphs are not supported",
                node_count=source.number_of_nodes(),
                edge_count=source.number_of_edges(),
            )

        labels = [str(node) for node in source.nodes()]
        edges = [
            (str(u), str(v), float(data.get(weight, 1.0)))
            for u, v, data in source.edges(data=True)
        ]
        return self.build(labels, edges)
