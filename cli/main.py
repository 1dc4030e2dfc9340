"""GTO Trainer CLI — Typer-based command line interface."""

import logging
import random
import time
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from gto_trainer import config

app = typer.Typer(
    name="gto-trainer",
    help="Preflop position/hand-strength drilling tool",
    no_args_is_help=True,
)
console = Console()

# Exit codes for `check`
EXIT_WRONG = 1
EXIT_BAD_INPUT = 2


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v",
                                 help="Show debug logging"),
):
    """Preflop position/hand-strength drilling tool."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _parse_position(text: str):
    from gto_trainer.models.position import Position
    try:
        return Position.parse(text)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(EXIT_BAD_INPUT)


def _resolve_hand(text: str):
    """Accept a class label ('AKs') or two hole cards ('Ah Kd', 'AhKd')."""
    from gto_trainer.models.card import Card
    from gto_trainer.models.hand import HandClass
    from gto_trainer.training.catalog import DEFAULT_CATALOG

    parts = text.split()
    if len(parts) == 1 and len(text.strip()) == 4:
        parts = [text.strip()[:2], text.strip()[2:]]

    try:
        cards = [Card.parse(p) for p in parts] if len(parts) == 2 else None
    except ValueError:
        # Not hole cards, e.g. "ka s"
        cards = None

    try:
        if cards:
            label = HandClass.label_from_cards(*cards)
        else:
            label = text
        return DEFAULT_CATALOG.lookup(label)
    except (ValueError, KeyError) as e:
        console.print(f"[red]Invalid hand '{text}':[/red] {e}")
        raise typer.Exit(EXIT_BAD_INPUT)


@app.command()
def drill(
    position: str = typer.Option(config.DEFAULT_POSITION, "--position", "-p",
                                 help="Starting seat (UTG, EP, LJ, HJ, CO, BTN)"),
    rounds: int = typer.Option(config.DEFAULT_ROUNDS, "--rounds", "-n",
                               help="Number of hands to answer"),
    seed: Optional[int] = typer.Option(None, "--seed",
                                       help="Seed for reproducible hands"),
    delay: float = typer.Option(config.AUTO_ADVANCE_DELAY, "--delay",
                                help="Pause in seconds after a correct answer"),
):
    """Start an interactive drill session."""
    from gto_trainer.formatters.table import TableFormatter
    from gto_trainer.formatters.text import TextFormatter
    from gto_trainer.models.action import Action
    from gto_trainer.models.position import Position
    from gto_trainer.training.catalog import DEFAULT_CATALOG, HandCatalog
    from gto_trainer.training.session import DrillSession

    seat = _parse_position(position)
    catalog = DEFAULT_CATALOG
    if seed is not None:
        catalog = HandCatalog(DEFAULT_CATALOG.all_hands(), rng=random.Random(seed))

    session = DrillSession(position=seat, catalog=catalog)
    text = TextFormatter()

    console.print(f"[bold]Drill: {rounds} hands from {seat.value}.[/bold] "
                  "Answer with [cyan]f[/cyan]old, [cyan]c[/cyan]all, "
                  "[cyan]o[/cyan]pen or [cyan]r[/cyan]aise; "
                  "[cyan]p <seat>[/cyan] switches seat, [cyan]q[/cyan] quits.\n")

    session.deal()
    while session.total_count < rounds:
        console.print(Panel(text.format_spot(session.current_hand, session.position),
                            title=f"Hand {session.total_count + 1}/{rounds}"))
        choice = typer.prompt("Your action").strip()

        if choice.lower() == "q":
            console.print("\n[dim]Drill ended.[/dim]")
            break

        if choice.lower().startswith("p "):
            try:
                new_seat = Position.parse(choice[2:])
            except ValueError as e:
                console.print(f"[red]{e}[/red]")
                continue
            session.change_position(new_seat)
            console.print(f"[dim]Seat changed to {new_seat.value}.[/dim]")
            continue

        try:
            action = Action.parse(choice)
        except ValueError:
            console.print(f"[red]Unknown action: {choice}[/red]")
            continue

        hand = session.current_hand
        result = session.submit(action)
        style = "green" if result.is_correct else "red"
        console.print(f"[bold {style}]{text.format_result(hand, session.position, result)}"
                      f"[/bold {style}]\n")

        if result.is_correct:
            if delay > 0:
                time.sleep(delay)
        else:
            typer.prompt("Press Enter for the next hand", default="",
                         show_default=False)
            session.advance()

        if session.total_count < rounds:
            session.deal()

    console.print()
    TableFormatter(console).print_session_summary(session)


@app.command()
def check(
    hand: str = typer.Argument(..., help="Hand label (AKs, 72o, TT) or hole cards (AhKd)"),
    position: str = typer.Argument(..., help="Seat (UTG, EP, LJ, HJ, CO, BTN)"),
    action: str = typer.Argument(..., help="Fold, Call, Open or Raise"),
):
    """Judge a single decision. Exits 0 when correct, 1 when wrong."""
    from gto_trainer.formatters.text import TextFormatter
    from gto_trainer.models.action import Action
    from gto_trainer.training.engine import evaluate

    hand_class = _resolve_hand(hand)
    seat = _parse_position(position)
    try:
        user_action = Action.parse(action)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(EXIT_BAD_INPUT)

    result = evaluate(seat, hand_class.tier, user_action)
    style = "green" if result.is_correct else "red"
    console.print(f"[{style}]{TextFormatter().format_result(hand_class, seat, result)}[/{style}]")

    if not result.is_correct:
        raise typer.Exit(EXIT_WRONG)


@app.command()
def chart(
    position: Optional[str] = typer.Option(None, "--position", "-p",
                                           help="Seat to show the strategy for"),
    tiers: bool = typer.Option(False, "--tiers",
                               help="Show the strength tier grid instead"),
):
    """Show the strategy chart for a seat, or the tier grid."""
    from gto_trainer.formatters.table import TableFormatter

    fmt = TableFormatter(console)
    if tiers or position is None:
        fmt.print_tier_chart()
        if position is None:
            return
    fmt.print_strategy_chart(_parse_position(position))


@app.command()
def hands(
    tier: Optional[str] = typer.Option(None, "--tier", "-t",
                                       help="Only this tier (e.g. PURPLE, R_RED, cyan)"),
    plain: bool = typer.Option(False, "--plain",
                               help="One line per tier instead of a table"),
):
    """List the starting-hand catalog by tier."""
    from gto_trainer.formatters.table import TableFormatter
    from gto_trainer.formatters.text import TextFormatter
    from gto_trainer.models.hand import StrengthTier
    from gto_trainer.training.catalog import DEFAULT_CATALOG

    selected = DEFAULT_CATALOG.all_hands()
    if tier:
        key = tier.strip().upper()
        if not key.startswith("R_"):
            key = f"R_{key}"
        try:
            wanted = StrengthTier(key)
        except ValueError:
            console.print(f"[red]Unknown tier: {tier}[/red]")
            console.print(f"Valid tiers: {', '.join(t.label for t in StrengthTier)}")
            raise typer.Exit(EXIT_BAD_INPUT)
        selected = DEFAULT_CATALOG.by_tier(wanted)

    if plain:
        text = TextFormatter()
        for t in StrengthTier:
            if tier and t != wanted:
                continue
            console.print(text.format_tier_list(list(selected), t), markup=False)
        return

    TableFormatter(console).print_hands(selected)


if __name__ == "__main__":
    app()
