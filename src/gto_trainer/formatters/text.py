"""Plain text formatting for terminal output."""

from typing import List

from gto_trainer.models.card import Rank
from gto_trainer.models.hand import HandClass, StrengthTier
from gto_trainer.models.position import Position
from gto_trainer.training.engine import EvaluationResult


def grid_label(row: Rank, col: Rank) -> str:
    """Hand label at a cell of the 13x13 range grid.

    Pairs sit on the diagonal, suited hands above it and offsuit below.
    """
    if row == col:
        return row.value * 2
    if row.numeric_value > col.numeric_value:
        return f"{row.value}{col.value}s"
    return f"{col.value}{row.value}o"


class TextFormatter:
    """Format drill data as plain text for terminal display."""

    def format_spot(self, hand: HandClass, position: Position) -> str:
        """The prompt line for a round."""
        return f"{position.value} ({position.category})  |  Hand: {hand.label}"

    def format_result(self, hand: HandClass, position: Position,
                      result: EvaluationResult) -> str:
        """One-line feedback after an answer."""
        tier = hand.tier
        return (f"{result.message}  {hand.label} is {tier.label} "
                f"(tier {tier.rank}) vs {position.value} threshold "
                f"{position.base_strength}")

    def format_tier_list(self, hands: List[HandClass],
                         tier: StrengthTier) -> str:
        labels = " ".join(h.label for h in hands if h.tier == tier)
        return f"{tier.label} [{tier.rank}]: {labels or '-'}"
