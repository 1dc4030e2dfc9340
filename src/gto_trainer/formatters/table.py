"""Rich table formatting for terminal output."""

from typing import Dict, Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gto_trainer.formatters.text import grid_label
from gto_trainer.models.action import Action
from gto_trainer.models.card import Rank
from gto_trainer.models.hand import HandClass, StrengthTier
from gto_trainer.models.position import Position
from gto_trainer.training.catalog import DEFAULT_CATALOG, HandCatalog
from gto_trainer.training.engine import strategy_chart
from gto_trainer.training.session import DrillSession

ACTION_STYLES = {
    Action.FOLD: "bright_black",
    Action.OPEN: "bold green",
    Action.CALL: "bold yellow",
    Action.RAISE: "bold red",
}


class TableFormatter:
    """Format drill data as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def _grid(self, title: str, styles: Dict[str, str]) -> Table:
        table = Table(title=title, show_header=True, padding=(0, 0))
        table.add_column("", style="bold", min_width=2, justify="center")
        ranks = Rank.descending()
        for r in ranks:
            table.add_column(r.value, justify="center", min_width=4, no_wrap=True)
        for row in ranks:
            cells = []
            for col in ranks:
                label = grid_label(row, col)
                cells.append(Text(label, style=styles.get(label, "")))
            table.add_row(row.value, *cells)
        return table

    def print_strategy_chart(self, position: Position,
                             catalog: HandCatalog | None = None) -> None:
        """Print the 13x13 grid coloured by the correct action for a seat."""
        chart = strategy_chart(position, catalog)
        styles = {label: ACTION_STYLES[action] for label, action in chart.items()}
        self.console.print(self._grid(
            f"{position.value} strategy (threshold {position.base_strength})",
            styles,
        ))

        legend = Text()
        for action in Action:
            count = sum(1 for a in chart.values() if a == action)
            legend.append(f" {action.value} ({count}) ", style=ACTION_STYLES[action])
        self.console.print(legend)

    def print_tier_chart(self, catalog: HandCatalog | None = None) -> None:
        """Print the 13x13 grid coloured by strength tier."""
        catalog = catalog if catalog is not None else DEFAULT_CATALOG
        styles = {h.label: h.tier.color for h in catalog}
        self.console.print(self._grid("Hand strength tiers", styles))

        legend = Text()
        for tier, count in catalog.tier_counts().items():
            legend.append(f" {tier.label} {tier.rank} ({count}) ", style=tier.color)
        self.console.print(legend)

    def print_hands(self, hands: Iterable[HandClass]) -> None:
        """Print catalog entries grouped by tier."""
        table = Table(title="Starting hands")
        table.add_column("Tier", style="cyan")
        table.add_column("Rank", justify="right")
        table.add_column("Count", justify="right")
        table.add_column("Hands")

        hands = list(hands)
        for tier in StrengthTier:
            members = [h.label for h in hands if h.tier == tier]
            if not members:
                continue
            table.add_row(
                Text(tier.label, style=tier.color),
                str(tier.rank),
                str(len(members)),
                " ".join(members),
            )

        self.console.print(table)

    def print_session_summary(self, session: DrillSession) -> None:
        """Print per-seat accuracy for a finished drill."""
        tallies = session.results_by_position
        if not tallies:
            self.console.print("[dim]No hands answered.[/dim]")
            return

        table = Table(title="Drill Summary")
        table.add_column("Position", style="cyan")
        table.add_column("Hands", justify="right")
        table.add_column("Correct", justify="right", style="green")
        table.add_column("Accuracy", justify="right")

        for pos, tally in tallies.items():
            table.add_row(
                pos.value,
                str(tally.total),
                str(tally.correct),
                f"{tally.accuracy * 100:.1f}%",
            )
        table.add_row(
            "Total",
            str(session.total_count),
            str(session.correct_count),
            f"{session.accuracy * 100:.1f}%",
            style="bold",
        )

        self.console.print(table)

        if session.mistakes:
            self.console.print("\n[bold]Mistakes:[/bold]")
            for rec in session.mistakes:
                self.console.print(
                    f"  {rec.position.value:<4} {rec.hand.label:<4} "
                    f"you: {rec.user_action.value:<5} correct: "
                    f"[green]{rec.result.correct_action.value}[/green]"
                )
