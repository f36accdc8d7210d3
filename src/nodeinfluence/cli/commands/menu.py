"""Interactive menu for browsing the bundled examples."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import typer
from rich.console import Console
from rich.panel import Panel

from nodeinfluence.cli.commands.score import score_dataset
from nodeinfluence.core import get_logger, get_settings
from nodeinfluence.graph import get_dataset

console = Console()
logger = get_logger(__name__)


class MenuCommand(IntEnum):
    EXIT = 0
    UNWEIGHTED_EXAMPLE = 1
    WEIGHTED_EXAMPLE = 2


@dataclass(frozen=True)
class MenuAction:
    """Dataset and engine run by a menu entry."""

    title: str
    dataset: str
    weighted: bool


ACTIONS: dict[MenuCommand, MenuAction] = {
    MenuCommand.UNWEIGHTED_EXAMPLE: MenuAction("Unweighted graph (example 1)", "social", weighted=False),
    MenuCommand.WEIGHTED_EXAMPLE: MenuAction("Weighted graph (example 2)", "lettered", weighted=True),
}


def render_menu() -> Panel:
    lines = ["[bold]Please select an option:[/bold]", ""]
    for command, action in ACTIONS.items():
        lines.append(f"[cyan]{command.value}[/cyan]. {action.title}")
    lines.append("")
    lines.append(f"[cyan]{MenuCommand.EXIT.value}[/cyan]. Exit")
    return Panel("\n".join(lines), title="Influence scores of nodes in a graph")


def parse_command(raw: str) -> MenuCommand | None:
    """Parse a menu choice, None when it is not a known command."""
    try:
        return MenuCommand(int(raw.strip()))
    except ValueError:
        return None


def run_action(action: MenuAction, precision: int) -> None:
    labeled = get_dataset(action.dataset).load()
    score_dataset(labeled, weighted=action.weighted, precision=precision)


def menu() -> None:
    """
    Interactive menu over the bundled examples.

    Example:
        nodeinfluence menu
    """
    settings = get_settings()

    while True:
        console.print(render_menu())
        try:
            raw = console.input(">> ")
        except EOFError:
            break

        command = parse_command(raw)
        if command is None:
            logger.debug(f"Rejected menu input: {raw!r}")
            console.print("[red]ERROR! Please enter one of the listed options.[/red]")
            continue
        if command is MenuCommand.EXIT:
            break

        run_action(ACTIONS[command], settings.score_precision)

    console.print("\n[green]Exiting program...[/green]")
    raise typer.Exit()
