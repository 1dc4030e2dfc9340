"""Six-max seat model and the per-seat base strength table."""

from enum import Enum


class Position(str, Enum):
    UTG = "UTG"
    EP = "EP"
    LJ = "LJ"
    HJ = "HJ"
    CO = "CO"
    BTN = "BTN"

    @property
    def base_strength(self) -> int:
        """Minimum tier rank this seat opens with."""
        return POSITION_BASE_STRENGTH[self]

    @property
    def is_opening(self) -> bool:
        """UTG acts first, so only Open or Fold can be correct there."""
        return self is Position.UTG

    @property
    def category(self) -> str:
        if self in (Position.UTG, Position.EP):
            return "Early"
        if self in (Position.LJ, Position.HJ):
            return "Middle"
        return "Late"

    @classmethod
    def parse(cls, text: str) -> "Position":
        try:
            return cls(text.strip().upper())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown position: {text} (valid: {valid})") from None


POSITION_BASE_STRENGTH = {
    Position.UTG: 5,  # Red
    Position.EP: 4,   # Yellow
    Position.LJ: 3,   # Green
    Position.HJ: 3,   # Green
    Position.CO: 2,   # Cyan
    Position.BTN: 1,  # White
}
