"""Core module - configuration, logging, exceptions."""

from nodeinfluence.core.config import Settings, get_settings
from nodeinfluence.core.exceptions import (
    NodeInfluenceError,
    GraphError,
    NodeOutOfRangeError,
    NegativeWeightError,
    DegenerateGraphError,
    DatasetError,
)
from nodeinfluence.core.logging import setup_logging, get_logger, LogContext

__all__ = [
    "Settings",
    "get_settings",
    "NodeInfluenceError",
    "GraphError",
    "NodeOutOfRangeError",
    "NegativeWeightError",
    "DegenerateGraphError",
    "DatasetError",
    "setup_logging",
    "get_logger",
    "LogContext",
]
