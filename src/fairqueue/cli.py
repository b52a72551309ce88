"""fairqueue CLI entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fairqueue.errors import ScenarioError
from fairqueue.scenario import (
    DEFAULT_ROUNDS,
    DequeueResult,
    PersonSpec,
    PriorityEntrySpec,
    Scenario,
    TurnResult,
    load_scenario,
    run_priority,
    run_turns,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def parse_pairs(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, int]]:
    """Split NAME:NUMBER arguments, splitting on the last colon."""
    pairs = []
    for raw in values:
        name, sep, number = raw.rpartition(":")
        if not sep:
            raise click.BadParameter(f"expected NAME:NUMBER, got {raw!r}", ctx=ctx, param=param)
        try:
            pairs.append((name, int(number)))
        except ValueError:
            raise click.BadParameter(f"{number!r} in {raw!r} is not an integer", ctx=ctx, param=param) from None
    return pairs


def print_dequeue_table(results: list[DequeueResult]) -> None:
    if not results:
        console.print("[yellow]Priority queue is empty[/yellow]")
        return

    table = Table(title="Dequeue Order")
    table.add_column("#", style="dim")
    table.add_column("Value", style="cyan")

    for result in results:
        table.add_row(str(result.position), result.value)

    console.print(table)


def print_turn_table(results: list[TurnResult]) -> None:
    if not results:
        console.print("[yellow]No one in the queue[/yellow]")
        return

    table = Table(title="Turns")
    table.add_column("Round", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Turns Left")
    table.add_column("Status")
    table.add_column("Queue Length", style="green")

    for result in results:
        turns = "∞" if result.turns <= 0 and result.requeued else str(result.turns)
        status = "[green]requeued[/green]" if result.requeued else "[red]done[/red]"
        table.add_row(str(result.round), result.name, turns, status, str(result.queue_length))

    console.print(table)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """fairqueue - priority and turn-taking queues."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)


@cli.command()
@click.argument("entries", nargs=-1, required=True, callback=parse_pairs)
def priority(entries: list[tuple[str, int]]) -> None:
    """Enqueue VALUE:PRIORITY pairs and print the dequeue order."""
    scenario = Scenario(
        priority=[PriorityEntrySpec(value=value, priority=pri) for value, pri in entries]
    )
    print_dequeue_table(run_priority(scenario))


@cli.command()
@click.argument("people", nargs=-1, required=True, callback=parse_pairs)
@click.option(
    "--rounds", "-r", default=DEFAULT_ROUNDS, type=click.IntRange(min=0), help="Maximum turns to take"
)
def turns(people: list[tuple[str, int]], rounds: int) -> None:
    """Rotate NAME:TURNS people and print each turn (TURNS <= 0 is infinite)."""
    scenario = Scenario(
        people=[PersonSpec(name=name, turns=count) for name, count in people],
        rounds=rounds,
    )
    print_turn_table(run_turns(scenario))


@cli.command()
@click.argument("scenario_path", type=click.Path(path_type=Path))
def run(scenario_path: Path) -> None:
    """Replay a YAML scenario file through both queues."""
    try:
        scenario = load_scenario(scenario_path)
    except ScenarioError as e:
        raise click.ClickException(str(e)) from e

    if scenario.priority:
        print_dequeue_table(run_priority(scenario))
    if scenario.people:
        print_turn_table(run_turns(scenario))
    if not scenario.priority and not scenario.people:
        console.print("[yellow]Scenario has no entries or people[/yellow]")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
