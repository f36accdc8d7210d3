"""Custom exceptions for nodeinfluence."""

from __future__ import annotations

from typing import Any


class NodeInfluenceError(Exception):
    """Base exception for all nodeinfluence errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class GraphError(NodeInfluenceError):
    """Raised when graph operations fail."""

    def __init__(
        self,
        message: str,
        node_count: int | None = None,
        edge_count: int | None = None,
    ) -> None:
        super().__init__(
            message,
            details={"node_count": node_count, "edge_count": edge_count},
        )
        self.node_count = node_count
        self.edge_count = edge_count


class NodeOutOfRangeError(GraphError):
    """Raised when a node id lies outside [0, node_count)."""

    def __init__(self, node: Any, node_count: int) -> None:
        super().__init__(
            f"Node {node!r} is out of range for a graph with {node_count} nodes",
            node_count=node_count,
        )
        self.details["node"] = node
        self.node = node


class NegativeWeightError(GraphError):
    """Raised when an edge weight is negative or not a finite number."""

    def __init__(self, u: int, v: int, weight: float, node_count: int) -> None:
        super().__init__(
            f"Edge ({u}, {v}) has invalid weight {weight}; weights must be finite and >= 0",
            node_count=node_count,
        )
        self.details.update({"u": u, "v": v, "weight": weight})
        self.weight = weight


class DegenerateGraphError(GraphError):
    """Raised when an influence score is requested on a single-node graph."""

    def __init__(self, message: str = "Influence score is undefined for a single-node graph") -> None:
        super().__init__(message, node_count=1)


class DatasetError(NodeInfluenceError):
    """Raised when a dataset or node label cannot be resolved."""

    def __init__(self, message: str, dataset: str | None = None, label: str | None = None) -> None:
        super().__init__(message, details={"dataset": dataset, "label": label})
        self.dataset = dataset
        self.label = label
