"""Tests for text and table formatters."""

from rich.console import Console

from gto_trainer.formatters.table import TableFormatter
from gto_trainer.formatters.text import TextFormatter, grid_label
from gto_trainer.models.action import Action
from gto_trainer.models.card import Rank
from gto_trainer.models.hand import HandClass, StrengthTier
from gto_trainer.models.position import Position
from gto_trainer.training.catalog import DEFAULT_CATALOG, HandCatalog
from gto_trainer.training.engine import evaluate
from gto_trainer.training.session import DrillSession


def _console():
    return Console(record=True, width=120, force_terminal=False)


class TestGrid:

    def test_grid_covers_catalog(self):
        ranks = Rank.descending()
        labels = [grid_label(r, c) for r in ranks for c in ranks]
        assert len(set(labels)) == 169
        assert all(label in DEFAULT_CATALOG for label in labels)

    def test_orientation(self):
        assert grid_label(Rank.ACE, Rank.KING) == "AKs"
        assert grid_label(Rank.KING, Rank.ACE) == "AKo"
        assert grid_label(Rank.NINE, Rank.NINE) == "99"


class TestTextFormatter:

    def test_format_result(self):
        hand = HandClass("QQ", StrengthTier.R_PURPLE)
        result = evaluate(Position.LJ, hand.tier, Action.CALL)
        line = TextFormatter().format_result(hand, Position.LJ, result)
        assert line.startswith("Wrong! Correct was Raise")
        assert "QQ" in line

    def test_format_tier_list(self):
        line = TextFormatter().format_tier_list(list(DEFAULT_CATALOG),
                                                StrengthTier.R_PURPLE)
        assert line == "Purple [6]: AA KK QQ AKs AKo"

    def test_format_tier_list_empty(self):
        line = TextFormatter().format_tier_list([], StrengthTier.R_RED)
        assert line.endswith("-")


class TestTableFormatter:

    def test_strategy_chart_legend(self):
        console = _console()
        TableFormatter(console).print_strategy_chart(Position.UTG)
        out = console.export_text()
        assert "UTG strategy" in out
        assert "Open (11)" in out
        assert "Raise (0)" in out

    def test_tier_chart_legend(self):
        console = _console()
        TableFormatter(console).print_tier_chart()
        out = console.export_text()
        assert "Fold 0 (95)" in out

    def test_session_summary(self):
        console = _console()
        session = DrillSession(catalog=HandCatalog([HandClass("AA", StrengthTier.R_PURPLE)]))
        session.deal()
        session.submit(Action.FOLD)
        TableFormatter(console).print_session_summary(session)
        out = console.export_text()
        assert "Drill Summary" in out
        assert "0.0%" in out
        assert "Mistakes" in out

    def test_empty_summary(self):
        console = _console()
        TableFormatter(console).print_session_summary(DrillSession())
        assert "No hands answered" in console.export_text()
