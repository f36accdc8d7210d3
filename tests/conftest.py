# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src to sys.path so `import nodeinfluence` works without an install.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from nodeinfluence.core import get_settings  # noqa: E402
from nodeinfluence.graph import Graph  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache so env changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def path_graph() -> Graph:
    # 0 - 1 - 2
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    return g


@pytest.fixture
def weighted_triangle() -> Graph:
    g = Graph(3)
    g.add_edge(0, 1, 1.0)
    g.add_edge(1, 2, 1.0)
    g.add_edge(0, 2, 5.0)
    return g


@pytest.fixture
def disconnected_graph() -> Graph:
    # node 2 is isolated
    g = Graph(3)
    g.add_edge(0, 1)
    return g
