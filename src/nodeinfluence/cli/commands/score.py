"""Influence scoring commands for nodeinfluence."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from nodeinfluence.core import LogContext, NodeInfluenceError, get_settings
from nodeinfluence.graph import (
    UNREACHABLE,
    InfluenceResult,
    InfluenceScoreCalculator,
    LabeledGraph,
    get_dataset,
    influence_score,
)

console = Console()
app = typer.Typer(
    name="score",
    help="Influence scoring commands",
    no_args_is_help=True,
)

MODES = ("auto", "unweighted", "weighted")


def _weighted_flag(mode: str) -> bool | None:
    """Map a mode name onto InfluenceScoreCalculator's weighted argument."""
    mode = mode.strip().lower()
    if mode not in MODES:
        console.print(f"[red]Error: mode must be one of {', '.join(MODES)}[/red]")
        raise typer.Exit(2)
    if mode == "auto":
        return None
    return mode == "weighted"


def _load(name: str) -> LabeledGraph:
    try:
        return get_dataset(name).load()
    except NodeInfluenceError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e


def format_score(value: float, precision: int) -> str:
    if value == UNREACHABLE:
        return "inf"
    return f"{round(value, precision):.{precision}f}"


def render_adjacency(labeled: LabeledGraph) -> Table:
    """Adjacency list table, one row per node."""
    table = Table(title=f"Adjacency List ({labeled.name})")
    table.add_column("Node", style="cyan")
    table.add_column("Neighbors (weight)")
    for label, neighbors in labeled.adjacency_rows():
        table.add_row(label, ", ".join(neighbors) or "[dim]-[/dim]")
    return table


def render_scores(
    results: list[InfluenceResult],
    title: str,
    precision: int,
) -> Table:
    """Score table in the order given."""
    table = Table(title=title)
    table.add_column("Node", style="cyan")
    table.add_column("Influence", justify="right", style="yellow")
    table.add_column("Reachable", justify="right", style="green")
    table.add_column("Total Distance", justify="right", style="magenta")
    for result in results:
        table.add_row(
            result.label,
            format_score(result.score, precision),
            str(result.reachable_count),
            f"{result.total_distance:g}",
        )
    return table


def score_dataset(
    labeled: LabeledGraph,
    weighted: bool | None,
    precision: int,
    top_k: int | None = None,
) -> list[InfluenceResult]:
    """Print adjacency and scores for a labelled graph; return the results shown."""
    calculator = InfluenceScoreCalculator(weighted=weighted)
    engine = calculator.engine(labeled.graph)

    console.print(render_adjacency(labeled))

    try:
        with LogContext(dataset=labeled.name, engine=engine.name):
            results = calculator.compute(labeled.graph, labels=labeled.labels)
    except NodeInfluenceError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e

    if top_k is None:
        shown = list(results.values())
        title = f"Influence scores for all nodes ({engine.name})"
    else:
        shown = calculator.get_top_k(results, k=top_k)
        title = f"Top {len(shown)} nodes by influence ({engine.name})"

    console.print(render_scores(shown, title, precision))
    return shown


@app.command("example")
def example(
    dataset: str = typer.Argument(
        ...,
        help="Dataset name (see 'nodeinfluence datasets')",
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Path engine: auto, unweighted or weighted",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-t",
        help="Only show the top N nodes, ranked by score",
        min=1,
    ),
    precision: Optional[int] = typer.Option(
        None,
        "--precision",
        "-p",
        help="Decimal places for scores",
        min=0,
        max=12,
    ),
) -> None:
    """
    Score every node of a bundled dataset.

    Example:
        nodeinfluence score example social
        nodeinfluence score example lettered --top 3
    """
    settings = get_settings()
    weighted = _weighted_flag(mode or settings.default_mode)
    labeled = _load(dataset)

    score_dataset(
        labeled,
        weighted=weighted,
        precision=settings.score_precision if precision is None else precision,
        top_k=top,
    )


@app.command("top")
def top(
    dataset: str = typer.Argument(..., help="Dataset name"),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Number of nodes to show (default: TOP_K setting)",
        min=1,
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Path engine: auto, unweighted or weighted",
    ),
) -> None:
    """
    Rank a dataset's nodes by influence.

    Example:
        nodeinfluence score top lettered --limit 3
    """
    settings = get_settings()
    labeled = _load(dataset)

    shown = score_dataset(
        labeled,
        weighted=_weighted_flag(mode or settings.default_mode),
        precision=settings.score_precision,
        top_k=limit or settings.top_k,
    )

    if shown:
        console.print(f"\n[green]Most influential: {shown[0].label}[/green]")


@app.command("node")
def node(
    dataset: str = typer.Argument(..., help="Dataset name"),
    label: str = typer.Argument(..., help="Node label, e.g. Diana or C"),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Path engine: auto, unweighted or weighted",
    ),
) -> None:
    """
    Show one node's influence score and its distance to every other node.

    Example:
        nodeinfluence score node social Diana
    """
    settings = get_settings()
    calculator = InfluenceScoreCalculator(weighted=_weighted_flag(mode or settings.default_mode))
    labeled = _load(dataset)

    try:
        target = labeled.node(label)
        engine = calculator.engine(labeled.graph)
        distances = engine.distances(labeled.graph, target)
        value = influence_score(distances, labeled.graph.node_count, target)
    except NodeInfluenceError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e

    console.print(Panel(
        f"[bold]{label}[/bold] in [cyan]{labeled.name}[/cyan]\n\n"
        f"Engine: [cyan]{engine.name}[/cyan]\n"
        f"Influence: [yellow]{format_score(value, settings.score_precision)}[/yellow]",
        title="Node Influence",
    ))

    table = Table(title="Distances")
    table.add_column("Node", style="cyan")
    table.add_column("Distance", justify="right", style="green")
    for other, distance in enumerate(distances):
        if other == target:
            continue
        shown = "[red]unreachable[/red]" if distance == UNREACHABLE else f"{distance:g}"
        table.add_row(labeled.labels[other], shown)

    console.print(table)


if __name__ == "__main__":
    app()
