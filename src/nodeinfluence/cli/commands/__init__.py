"""CLI commands module for nodeinfluence."""

from nodeinfluence.cli.commands import menu, score

__all__ = ["menu", "score"]
