"""Drill action model."""

from enum import Enum


class Action(str, Enum):
    """The four answers a player can give for a preflop spot."""
    FOLD = "Fold"
    CALL = "Call"
    OPEN = "Open"
    RAISE = "Raise"

    @property
    def order(self) -> int:
        """Aggression order: Fold < Open < Call < Raise."""
        return ["Fold", "Open", "Call", "Raise"].index(self.value)

    @property
    def shortcut(self) -> str:
        return self.value[0].lower()

    @classmethod
    def parse(cls, text: str) -> "Action":
        """Parse an action name or its first-letter shortcut (f/c/o/r)."""
        key = text.strip().lower()
        for action in cls:
            if key in (action.value.lower(), action.shortcut):
                return action
        raise ValueError(f"Unknown action: {text}")
