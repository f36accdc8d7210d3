"""Typer main application for nodeinfluence CLI."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from nodeinfluence import __version__
from nodeinfluence.cli.commands import menu, score
from nodeinfluence.core import setup_logging
from nodeinfluence.graph import DATASETS

console = Console()

app = typer.Typer(
    name="nodeinfluence",
    help="Closeness-centrality influence scores for undirected graphs",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Register sub-commands
app.add_typer(score.app, name="score", help="Influence scoring commands")
app.command("menu")(menu.menu)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        console.print(f"[bold blue]nodeinfluence[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override LOG_LEVEL (DEBUG shows path engine counters)",
    ),
) -> None:
    """
    nodeinfluence - influence scores of nodes in a graph

    Scores every node by closeness centrality: the number of other nodes
    divided by the total shortest-path distance to reach them.
    """
    setup_logging(level=log_level)


@app.command("datasets")
def datasets() -> None:
    """List the bundled example graphs."""
    table = Table(title="Datasets")
    table.add_column("Name", style="cyan")
    table.add_column("Nodes", justify="right", style="green")
    table.add_column("Edges", justify="right", style="green")
    table.add_column("Weighted", justify="center")
    table.add_column("Description")

    for dataset in DATASETS.values():
        labeled = dataset.load()
        table.add_row(
            dataset.name,
            str(labeled.graph.node_count),
            str(labeled.graph.edge_count),
            "yes" if dataset.weighted else "no",
            dataset.description,
        )

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
