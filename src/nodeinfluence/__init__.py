"""nodeinfluence - closeness-centrality influence scores for undirected graphs."""

__version__ = "0.1.0"
