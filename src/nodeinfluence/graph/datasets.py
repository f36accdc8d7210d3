"""Bundled example graphs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from nodeinfluence.core import DatasetError
from nodeinfluence.graph.builder import GraphBuilder, LabeledGraph


@dataclass(frozen=True)
class Dataset:
    """Registry entry for an example graph."""

    name: str
    description: str
    weighted: bool
    factory: Callable[[], LabeledGraph]

    def load(self) -> LabeledGraph:
        return self.factory()


def social_network() -> LabeledGraph:
    """Eight people and their friendships, unweighted."""
    people = ["Alicia", "Britney", "Claire", "Diana", "Edward", "Harry", "Gloria", "Fred"]
    friendships = [
        ("Alicia", "Britney"),
        ("Britney", "Claire"),
        ("Claire", "Diana"),
        ("Diana", "Edward"),
        ("Diana", "Harry"),
        ("Edward", "Harry"),
        ("Edward", "Gloria"),
        ("Edward", "Fred"),
        ("Gloria", "Fred"),
        ("Harry", "Gloria"),
    ]
    return GraphBuilder("social").build(people, friendships)


def lettered_network() -> LabeledGraph:
    """Ten lettered nodes joined by weighted edges."""
    letters = list("ABCDEFGHIJ")
    edges = [
        ("A", "B", 1),
        ("A", "C", 1),
        ("A", "E", 5),
        ("B", "C", 4),
        ("B", "E", 1),
        ("B", "G", 1),
        ("B", "H", 1),
        ("C", "D", 3),
        ("C", "E", 1),
        ("D", "E", 2),
        ("D", "F", 1),
        ("D", "G", 5),
        ("E", "G", 2),
        ("F", "G", 1),
        ("G", "H", 2),
        ("H", "I", 3),
        ("I", "J", 3),
    ]
    return GraphBuilder("lettered").build(letters, edges)


DATASETS: dict[str, Dataset] = {
    "social": Dataset(
        name="social",
        description="Named social graph, 8 people, unweighted friendships",
        weighted=False,
        factory=social_network,
    ),
    "lettered": Dataset(
        name="lettered",
        description="Lettered graph A-J, 17 weighted edges",
        weighted=True,
        factory=lettered_network,
    ),
}


def get_dataset(name: str) -> Dataset:
    """Look up a bundled dataset by name.

    Raises:
        DatasetError: If no dataset has that name.
    """
    try:
        return DATASETS[name.strip().lower()]
    except KeyError:
        available = ", ".join(sorted(DATASETS))
        raise DatasetError(f"Unknown dataset '{name}'. Available: {available}", dataset=name) from None
