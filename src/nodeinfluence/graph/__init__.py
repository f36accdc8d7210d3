"""Graph module - graph model, shortest paths and influence scoring."""

from nodeinfluence.graph.model import Graph
from nodeinfluence.graph.paths import (
    UNREACHABLE,
    BreadthFirstEngine,
    DijkstraEngine,
    DijkstraStats,
    PathEngine,
    compute_unweighted_distances,
    compute_weighted_distances,
    engine_for,
)
from nodeinfluence.graph.scoring import InfluenceResult, InfluenceScoreCalculator, influence_score
from nodeinfluence.graph.builder import GraphBuilder, LabeledGraph
from nodeinfluence.graph.datasets import DATASETS, Dataset, get_dataset

__all__ = [
    "Graph",
    "UNREACHABLE",
    "PathEngine",
    "BreadthFirstEngine",
    "DijkstraEngine",
    "DijkstraStats",
    "compute_unweighted_distances",
    "compute_weighted_distances",
    "engine_for",
    "InfluenceResult",
    "InfluenceScoreCalculator",
    "influence_score",
    "GraphBuilder",
    "LabeledGraph",
    "DATASETS",
    "Dataset",
    "get_dataset",
]
