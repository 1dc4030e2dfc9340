"""Starting-hand classes and their strength tiers."""

from dataclasses import dataclass
from enum import Enum

from gto_trainer.models.card import Card, Rank


class StrengthTier(str, Enum):
    """Colour-coded strength tiers of the range chart, strongest first."""
    R_PURPLE = "R_PURPLE"
    R_RED = "R_RED"
    R_YELLOW = "R_YELLOW"
    R_GREEN = "R_GREEN"
    R_CYAN = "R_CYAN"
    R_WHITE = "R_WHITE"
    R_FOLD = "R_FOLD"

    @property
    def rank(self) -> int:
        return TIER_RANKS[self]

    @property
    def color(self) -> str:
        """Rich colour name used when drawing the chart."""
        return TIER_COLORS[self]

    @property
    def label(self) -> str:
        return self.value[2:].title()


TIER_RANKS = {
    StrengthTier.R_PURPLE: 6,
    StrengthTier.R_RED: 5,
    StrengthTier.R_YELLOW: 4,
    StrengthTier.R_GREEN: 3,
    StrengthTier.R_CYAN: 2,
    StrengthTier.R_WHITE: 1,
    StrengthTier.R_FOLD: 0,
}

TIER_COLORS = {
    StrengthTier.R_PURPLE: "magenta",
    StrengthTier.R_RED: "red",
    StrengthTier.R_YELLOW: "yellow",
    StrengthTier.R_GREEN: "green",
    StrengthTier.R_CYAN: "cyan",
    StrengthTier.R_WHITE: "white",
    StrengthTier.R_FOLD: "bright_black",
}


@dataclass(frozen=True)
class HandClass:
    """One of the 169 distinct starting hands, e.g. 'AA', 'AKs', '72o'."""
    label: str
    tier: StrengthTier

    @property
    def is_pair(self) -> bool:
        return len(self.label) == 2

    @property
    def is_suited(self) -> bool:
        return self.label.endswith("s")

    @property
    def is_offsuit(self) -> bool:
        return self.label.endswith("o")

    @property
    def high_rank(self) -> Rank:
        return Rank.from_char(self.label[0])

    @property
    def low_rank(self) -> Rank:
        return Rank.from_char(self.label[1])

    def __str__(self) -> str:
        return self.label

    @staticmethod
    def normalize_label(text: str) -> str:
        """Canonicalize user input like 'kas', 'A K o' or 'TT' to a class label.

        The higher rank comes first, ranks are upper case and the suitedness
        suffix is lower case. Pairs take no suffix, other hands require one.
        """
        s = "".join(text.split()).replace("10", "T")
        if len(s) not in (2, 3):
            raise ValueError(f"Cannot parse hand: {text}")

        first = Rank.from_char(s[0])
        second = Rank.from_char(s[1])
        suffix = s[2].lower() if len(s) == 3 else ""

        if first == second:
            if suffix:
                raise ValueError(f"Pairs take no suited/offsuit suffix: {text}")
            return first.value * 2

        if suffix not in ("s", "o"):
            raise ValueError(f"Non-pair hand needs an 's' or 'o' suffix: {text}")

        high, low = sorted((first, second), key=lambda r: r.numeric_value, reverse=True)
        return f"{high.value}{low.value}{suffix}"

    @staticmethod
    def label_from_cards(first: Card, second: Card) -> str:
        """Class label for two concrete hole cards, e.g. Ah Kh -> 'AKs'."""
        if first == second:
            raise ValueError(f"Duplicate card: {first!r}")
        if first.rank == second.rank:
            return first.rank.value * 2
        high, low = sorted((first, second), key=lambda c: c.rank.numeric_value, reverse=True)
        suffix = "s" if first.suit == second.suit else "o"
        return f"{high.rank.value}{low.rank.value}{suffix}"
