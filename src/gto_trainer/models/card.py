"""Card, Rank, and Suit models."""

from enum import Enum


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_char(cls, c: str) -> "Suit":
        for s in cls:
            if s.value == c.lower():
                return s
        raise ValueError(f"Unknown suit: {c}")


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        return RANK_ORDER.index(self) + 2

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        if c == "10":
            return cls.TEN
        for r in cls:
            if r.value == c.upper():
                return r
        raise ValueError(f"Unknown rank: {c}")

    @classmethod
    def descending(cls) -> list["Rank"]:
        """Ranks from Ace down to Two, the row/column order of a range grid."""
        return list(reversed(RANK_ORDER))


RANK_ORDER = list(Rank)


class Card:
    """A single playing card."""

    def __init__(self, rank: Rank, suit: Suit):
        self.rank = rank
        self.suit = suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10c'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_char(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_char(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    def __repr__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))
