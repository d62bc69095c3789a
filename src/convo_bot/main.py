"""CLI startup entrypoint for Convo Bot."""

from __future__ import annotations

import typer
from rich import print
from rich.table import Table

from convo_bot.config import settings
from convo_bot.conversation import DiscussionSession
from convo_bot.errors import CatalogLoadError
from convo_bot.graph import ContextGraph, render_graph
from convo_bot.models import Subject
from convo_bot.telemetry import configure_logging

app = typer.Typer(help="Convo Bot recommendation entrypoint")

_EXIT_WORDS = {"quit", "exit", "bye", "goodbye"}


def _build_graph(characteristics: str | None, solutions: str | None) -> ContextGraph:
    configure_logging(settings.log_level)
    characteristics_path = characteristics or settings.characteristics_path
    solutions_path = solutions or settings.solutions_path
    if not characteristics_path or not solutions_path:
        raise typer.BadParameter(
            "Provide --characteristics and --solutions or set "
            "CONVO_BOT_CHARACTERISTICS_PATH and CONVO_BOT_SOLUTIONS_PATH"
        )
    try:
        return ContextGraph.from_files(characteristics_path, solutions_path)
    except CatalogLoadError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _parse_observation(raw: str) -> tuple[str, float]:
    name, separator, amount = raw.rpartition("=")
    if not separator:
        return raw.strip(), settings.default_increment
    try:
        return name.strip(), float(amount)
    except ValueError:
        raise typer.BadParameter(f"Observation '{raw}' must look like NAME or NAME=AMOUNT")


def _apply(graph: ContextGraph, observe: list[str] | None, disable: list[str] | None) -> list[str]:
    problems: list[str] = []
    for name in disable or []:
        solution = graph.solutions.get(name)
        characteristic = graph.characteristics.get(name)
        if solution is not None and characteristic is not None:
            problems.append(f"{name!r} is both a solution and a characteristic; disabled the solution")
        subject: Subject | None = solution or characteristic
        if subject is None or not graph.set_node_enabled(subject, False):
            problems.append(f"Cannot disable unknown node: {name}")

    for raw in observe or []:
        name, amount = _parse_observation(raw)
        characteristic = graph.characteristics.get(name)
        if characteristic is None or not graph.increment(characteristic, amount):
            problems.append(f"Unknown characteristic: {name}")
    return problems


_CHARACTERISTICS_OPTION = typer.Option(None, "--characteristics", help="Characteristic catalog file")
_SOLUTIONS_OPTION = typer.Option(None, "--solutions", help="Solution catalog file")
_OBSERVE_OPTION = typer.Option(None, "--observe", help="Characteristic to increment, NAME or NAME=AMOUNT")
_DISABLE_OPTION = typer.Option(
    None, "--disable", help="Solution or characteristic to disable; a solution wins when both share the name"
)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "characteristics_path": settings.characteristics_path,
            "solutions_path": settings.solutions_path,
            "default_increment": settings.default_increment,
            "ranking_limit": settings.ranking_limit,
        }
    )


@app.command()
def rank(
    characteristics: str = _CHARACTERISTICS_OPTION,
    solutions: str = _SOLUTIONS_OPTION,
    observe: list[str] = _OBSERVE_OPTION,
    disable: list[str] = _DISABLE_OPTION,
    limit: int = typer.Option(None, help="How many solutions to list"),
    enabled_only: bool = typer.Option(
        settings.rank_enabled_only, "--enabled-only/--include-disabled", help="Hide disabled solutions"
    ),
) -> None:
    """Apply observations and print solutions ranked by weight."""
    graph = _build_graph(characteristics, solutions)
    problems = _apply(graph, observe, disable)
    table = Table(title="Ranked solutions")
    table.add_column("#", justify="right")
    table.add_column("Solution")
    table.add_column("Weight", justify="right")
    table.add_column("Enabled")
    shown = settings.ranking_limit if limit is None else limit
    for position, (solution, weight) in enumerate(graph.ranked_weights(enabled_only=enabled_only)[:shown], start=1):
        table.add_row(str(position), solution.name, f"{weight:g}", "yes" if graph.is_node_enabled(solution) else "no")
    print(table)
    if problems:
        print({"warnings": problems})


@app.command("show-graph")
def show_graph(
    characteristics: str = _CHARACTERISTICS_OPTION,
    solutions: str = _SOLUTIONS_OPTION,
    observe: list[str] = _OBSERVE_OPTION,
    disable: list[str] = _DISABLE_OPTION,
) -> None:
    """Print every node and edge with its weights."""
    graph = _build_graph(characteristics, solutions)
    problems = _apply(graph, observe, disable)
    typer.echo(render_graph(graph))
    if problems:
        print({"warnings": problems})


@app.command()
def chat(
    characteristics: str = _CHARACTERISTICS_OPTION,
    solutions: str = _SOLUTIONS_OPTION,
    show_graph_on_exit: bool = typer.Option(False, "--show-graph", help="Dump the graph when the chat ends"),
) -> None:
    """Talk through what's going on; mentioned topics shape the recommendations."""
    graph = _build_graph(characteristics, solutions)
    session = DiscussionSession(graph, increment=settings.default_increment)

    print({"chat": "started", "hint": "Type 'bye' to finish."})
    while True:
        try:
            utterance = input("> ")
        except EOFError:
            break
        if utterance.strip().lower() in _EXIT_WORDS:
            break
        if not utterance.strip():
            continue
        print(session.respond(utterance))

    print(
        {
            "chat": "stopped",
            "turns": session.turns,
            "recommendations": [solution.name for solution in session.recommendations(settings.ranking_limit)],
        }
    )
    if show_graph_on_exit:
        typer.echo(render_graph(graph))


if __name__ == "__main__":
    app()
